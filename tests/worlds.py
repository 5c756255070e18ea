from __future__ import annotations

import random
from typing import Dict, Iterable, List, Optional, Tuple

from river_hop.config import GameConfig
from river_hop.field import TileField
from river_hop.player import PlayerController
from river_hop.rafts import Raft, RaftSystem
from river_hop.rowgen import RowResult
from river_hop.tiles import Tile, TileKind, WaterRowMeta

# Row layouts in tests: G = grass, R = rock, ~ = water
KIND_CHARS = {"G": TileKind.GRASS, "R": TileKind.ROCK, "~": TileKind.WATER}


def parse_row(layout: str) -> List[TileKind]:
    return [KIND_CHARS[ch] for ch in layout]


class FakeLookup:
    """Read-only row view backed by layout strings."""

    def __init__(self, rows: Dict[int, str]):
        self.rows = {row: parse_row(layout) for row, layout in rows.items()}

    def has_row(self, row: int) -> bool:
        return row in self.rows

    def is_water_row(self, row: int) -> bool:
        return row in self.rows and self.rows[row][0] is TileKind.WATER

    def grass_columns(self, row: int) -> List[int]:
        return [c for c, k in enumerate(self.rows.get(row, ())) if k is TileKind.GRASS]


def make_row(row: int, layout: str, rafts: Iterable[Tuple[float, int]] = (),
             direction: int = 1, speed: float = 0.03) -> RowResult:
    """Build a row from a layout; `rafts` is (position, width) pairs."""
    kinds = parse_row(layout)
    tiles = tuple(Tile(column=c, row=row, kind=k) for c, k in enumerate(kinds))
    water: Optional[WaterRowMeta] = None
    raft_objs: Tuple[Raft, ...] = ()
    if kinds and kinds[0] is TileKind.WATER:
        water = WaterRowMeta(row=row, direction=direction, speed=speed)
        raft_objs = tuple(
            Raft(position=float(pos), row=row, width=w, direction=direction, speed=speed)
            for pos, w in rafts
        )
    return RowResult(row=row, tiles=tiles, rafts=raft_objs, water=water)


def build_world(config: GameConfig, rows: Dict[int, RowResult], seed: int = 0):
    rafts = RaftSystem(config.width)
    field = TileField(config, rafts, random.Random(seed))
    for result in rows.values():
        field.store(result)
    player = PlayerController(config, field, rafts)
    return field, rafts, player




def replace_row(field: TileField, result: RowResult) -> None:
    """Swap an already generated row for a scripted one."""
    field._rows.pop(result.row, None)
    field._water.pop(result.row, None)
    field.rafts._by_row.pop(result.row, None)
    field.store(result)
