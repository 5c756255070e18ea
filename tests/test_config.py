from __future__ import annotations

import pytest

from river_hop.__main__ import build_parser
from river_hop.config import GameConfig


def test_defaults() -> None:
    config = GameConfig()
    assert config.width == 20
    assert config.spawn_column == 10
    assert config.spawn_row == 0
    assert (config.tiles_ahead, config.tiles_behind) == (10, 3)
    assert config.rafts_enabled


def test_rock_band() -> None:
    config = GameConfig()
    assert [r for r in range(-2, 8) if config.in_rock_band(r)] == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"width": -3},
        {"tiles_ahead": -1},
        {"rock_band": (0, 5)},
        {"rock_band": (4, 2)},
        {"water_chance": 1.5},
        {"rock_chance": -0.1},
        {"raft_speed_range": (0.0, 0.05)},
        {"raft_count_range": (3, 2)},
        {"raft_widths": ()},
        {"lookback_depth": 0},
    ],
)
def test_invalid_config_rejected(kwargs) -> None:
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_cli_arguments() -> None:
    args = build_parser().parse_args(["--seed", "7", "--width", "12", "--classic"])
    assert args.seed == 7
    assert args.width == 12
    assert args.classic
    assert args.log_level == "WARNING"
