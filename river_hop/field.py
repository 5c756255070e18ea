import logging
import random
from typing import Dict, Iterator, List, Optional, Tuple

from .config import GameConfig
from .rafts import RaftSystem
from .rowgen import RowResult, generate_row
from .tiles import Tile, TileKind, WaterRowMeta

logger = logging.getLogger(__name__)


class TileField:
    """Sparse window of generated rows around the player.

    Rows are stored whole, keyed by row index. Rafts spawned with a water
    row are handed to the RaftSystem and evicted along with their row.
    """

    def __init__(self, config: GameConfig, rafts: RaftSystem, rng: random.Random):
        self.config = config
        self.rafts = rafts
        self.rng = rng
        self._rows: Dict[int, Tuple[Tile, ...]] = {}
        self._water: Dict[int, WaterRowMeta] = {}

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, row: int) -> bool:
        return row in self._rows

    # Row lookup used by the generator

    def has_row(self, row: int) -> bool:
        return row in self._rows

    def is_water_row(self, row: int) -> bool:
        tiles = self._rows.get(row)
        return bool(tiles) and tiles[0].kind is TileKind.WATER

    def grass_columns(self, row: int) -> List[int]:
        return [t.column for t in self._rows.get(row, ()) if t.kind is TileKind.GRASS]

    # Queries

    def tile_at(self, column: int, row: int) -> Optional[Tile]:
        if not self.config.in_bounds(column):
            raise ValueError(f"column {column} outside field of width {self.config.width}")
        tiles = self._rows.get(row)
        if tiles is None:
            return None
        return tiles[column]

    def kind_at(self, column: int, row: int) -> Optional[TileKind]:
        tile = self.tile_at(column, row)
        return tile.kind if tile else None

    def row_tiles(self, row: int) -> Tuple[Tile, ...]:
        return self._rows.get(row, ())

    def water_meta(self, row: int) -> Optional[WaterRowMeta]:
        return self._water.get(row)

    @property
    def min_row(self) -> int:
        if not self._rows:
            raise ValueError("field has no rows yet")
        return min(self._rows)

    @property
    def max_row(self) -> int:
        if not self._rows:
            raise ValueError("field has no rows yet")
        return max(self._rows)

    def rows(self) -> List[int]:
        return sorted(self._rows)

    def tiles(self) -> Iterator[Tile]:
        for row in sorted(self._rows):
            yield from self._rows[row]

    def water_rows(self) -> Tuple[WaterRowMeta, ...]:
        return tuple(self._water[row] for row in sorted(self._water))

    # Generation / eviction

    def generate(self, row: int) -> RowResult:
        if row in self._rows:
            raise ValueError(f"row {row} already generated")
        result = generate_row(row, self, self.config, self.rng)
        self.store(result)
        return result

    def store(self, result: RowResult):
        if result.row in self._rows:
            raise ValueError(f"row {result.row} already generated")
        if len(result.tiles) != self.config.width:
            raise ValueError(f"row {result.row} has {len(result.tiles)} tiles, expected {self.config.width}")
        self._rows[result.row] = result.tiles
        if result.water is not None:
            self._water[result.row] = result.water
        self.rafts.add(result.rafts)

    def ensure_row(self, row: int):
        # Rows revisited after eviction come back as fresh random rows.
        if row not in self._rows:
            logger.debug("regenerating evicted row %d", row)
            self.generate(row)

    def populate(self, nearest_row: int, farthest_row: int):
        """Generate every missing row from nearest_row down to farthest_row."""
        if farthest_row > nearest_row:
            raise ValueError(f"farthest_row {farthest_row} is behind nearest_row {nearest_row}")
        for row in range(nearest_row, farthest_row - 1, -1):
            if row not in self._rows:
                self.generate(row)

    def extend_to(self, target_row: int) -> int:
        start = self.min_row - 1
        if target_row > start:
            return 0
        self.populate(start, target_row)
        return start - target_row + 1

    def evict_after(self, max_row: int) -> int:
        stale = [row for row in self._rows if row > max_row]
        for row in stale:
            del self._rows[row]
            self._water.pop(row, None)
        self.rafts.evict_rows_after(max_row)
        if stale:
            logger.debug("evicted %d rows > %d", len(stale), max_row)
        return len(stale)

    def clear(self):
        self._rows.clear()
        self._water.clear()
        self.rafts.clear()
