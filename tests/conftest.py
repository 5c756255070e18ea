from __future__ import annotations

from typing import Dict

import pytest

from river_hop.config import GameConfig
from river_hop.rowgen import RowResult
from worlds import make_row


@pytest.fixture()
def all_grass_config() -> GameConfig:
    return GameConfig(width=20, water_chance=0.0, rock_chance=0.0)


@pytest.fixture()
def grass_field_rows() -> Dict[int, RowResult]:
    """Rows 0 and -1 as open grass, the rock band behind."""
    rows = {r: make_row(r, "R" * 20) for r in range(1, 6)}
    rows[0] = make_row(0, "G" * 20)
    rows[-1] = make_row(-1, "G" * 20)
    return rows
