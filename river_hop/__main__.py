import argparse
import logging
import random

from .config import GRID_COLS, GameConfig
from .session import GameSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="river-hop", description="River Hop - endless lane crossing")
    parser.add_argument("--seed", type=int, default=None, help="world seed (random if omitted)")
    parser.add_argument("--width", type=int, default=GRID_COLS, help="number of columns")
    parser.add_argument("--classic", action="store_true", help="no rafts: water is always deadly")
    parser.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    config = GameConfig(width=args.width, rafts_enabled=not args.classic)
    seed = args.seed if args.seed is not None else random.randint(0, 10_000_000)
    logging.getLogger("river_hop").info("starting with seed %d", seed)

    # Imported late so --help works without a display
    from .app import run

    run(GameSession(config, random.Random(seed)))


if __name__ == "__main__":
    main()
