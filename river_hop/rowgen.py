"""
Row generation.

Rows are generated one at a time, normally in decreasing row order as the
player advances. Each row looks back at rows that already exist so that:

- two water rows are never adjacent,
- every grass tile of the nearest land row behind has a way forward,
- the spawn area always has somewhere to stand.

Water rows are crossed on rafts, which can drop the player at any column,
so a land row after a river has to keep grass wherever the last land row
had it.
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple

from .config import GameConfig
from .rafts import Raft
from .tiles import Tile, TileKind, WaterRowMeta

logger = logging.getLogger(__name__)

ROW_LAND = "land"
ROW_WATER = "water"
ROW_ROCK_WALL = "rock_wall"


class RowLookup(Protocol):
    def has_row(self, row: int) -> bool: ...

    def is_water_row(self, row: int) -> bool: ...

    def grass_columns(self, row: int) -> List[int]: ...


@dataclass(frozen=True)
class RowResult:
    row: int
    tiles: Tuple[Tile, ...]
    rafts: Tuple[Raft, ...] = ()
    water: Optional[WaterRowMeta] = None

    @property
    def is_water(self) -> bool:
        return self.water is not None


def generate_row(row: int, lookup: RowLookup, config: GameConfig, rng: random.Random) -> RowResult:
    row_type = choose_row_type(row, lookup, config, rng)

    if row_type == ROW_ROCK_WALL:
        kinds = [TileKind.ROCK] * config.width
        result = RowResult(row=row, tiles=_tiles(row, kinds))
    elif row_type == ROW_WATER:
        result = _water_row(row, config, rng)
    else:
        kinds = _land_kinds(config, rng)
        repair_connectivity(row, kinds, lookup, config)
        _apply_spawn_overrides(row, kinds, config)
        result = RowResult(row=row, tiles=_tiles(row, kinds))

    logger.debug("generated %s row %d (%d rafts)", row_type, row, len(result.rafts))
    return result


def choose_row_type(row: int, lookup: RowLookup, config: GameConfig, rng: random.Random) -> str:
    if config.in_rock_band(row):
        return ROW_ROCK_WALL

    # Spawn row and the row ahead of it are always land; no back-to-back water.
    if row in (config.spawn_row, config.spawn_row - 1):
        return ROW_LAND
    if lookup.has_row(row + 1) and lookup.is_water_row(row + 1):
        return ROW_LAND

    return ROW_WATER if rng.random() < config.water_chance else ROW_LAND


def find_anchor_row(row: int, lookup: RowLookup, depth: int) -> Optional[int]:
    """Nearest row behind `row` that is missing or not water.

    Returns None when every row in the lookback window is water, in which
    case there is nothing to connect to.
    """
    probe = row + 1
    while probe <= row + depth:
        if not lookup.has_row(probe) or not lookup.is_water_row(probe):
            return probe
        probe += 1
    return None


def repair_connectivity(row: int, kinds: List[TileKind], lookup: RowLookup, config: GameConfig):
    anchor = find_anchor_row(row, lookup, config.lookback_depth)
    if anchor is None or not lookup.has_row(anchor):
        return

    prev_grass = lookup.grass_columns(anchor)

    if anchor != row + 1:
        # A river lies between: a raft can drop the player on any column.
        for col in prev_grass:
            kinds[col] = TileKind.GRASS
        return

    for col in prev_grass:
        neighbors = [c for c in (col - 1, col, col + 1) if config.in_bounds(c)]
        if not any(kinds[c] is TileKind.GRASS for c in neighbors):
            kinds[col] = TileKind.GRASS


def _land_kinds(config: GameConfig, rng: random.Random) -> List[TileKind]:
    kinds = [
        TileKind.ROCK if rng.random() < config.rock_chance else TileKind.GRASS
        for _ in range(config.width)
    ]
    if TileKind.GRASS not in kinds:
        kinds[rng.randrange(config.width)] = TileKind.GRASS
    return kinds


def _apply_spawn_overrides(row: int, kinds: List[TileKind], config: GameConfig):
    spawn = config.spawn_column
    if row == config.spawn_row:
        for col in (spawn - 1, spawn, spawn + 1):
            if config.in_bounds(col):
                kinds[col] = TileKind.GRASS
    elif row == config.spawn_row - 1:
        kinds[spawn] = TileKind.GRASS


def _water_row(row: int, config: GameConfig, rng: random.Random) -> RowResult:
    direction = rng.choice((-1, 1))
    lo, hi = config.raft_speed_range
    speed = lo + rng.random() * (hi - lo)
    meta = WaterRowMeta(row=row, direction=direction, speed=speed)

    rafts = []
    if config.rafts_enabled:
        count = rng.randint(*config.raft_count_range)
        spacing = config.width / count
        for i in range(count):
            width = rng.choice(config.raft_widths)
            # Stay inside this raft's slot so it doesn't overlap the next one
            slack = max(0.0, spacing - width)
            position = float(math.floor(spacing * i + rng.random() * slack))
            rafts.append(Raft(position=position, row=row, width=width, direction=direction, speed=speed))

    kinds = [TileKind.WATER] * config.width
    return RowResult(row=row, tiles=_tiles(row, kinds), rafts=tuple(rafts), water=meta)


def _tiles(row: int, kinds: List[TileKind]) -> Tuple[Tile, ...]:
    return tuple(Tile(column=col, row=row, kind=kind) for col, kind in enumerate(kinds))
