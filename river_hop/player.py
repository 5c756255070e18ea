import logging
import math
from enum import Enum
from typing import Optional

from .config import GameConfig
from .field import TileField
from .rafts import Raft, RaftSystem
from .tiles import TileKind

logger = logging.getLogger(__name__)

MOVES = frozenset({(-1, 0), (1, 0), (0, -1), (0, 1)})


class PlayerState(str, Enum):
    ALIVE = "alive"
    DEAD = "dead"


def snap_column(x: float) -> int:
    # Round half up, so a rider exactly between two cells hops from the right one.
    return int(math.floor(x + 0.5))


class PlayerController:
    # column is continuous so when you stand on a raft you are carried with it
    # (you become "part of the raft" until you hop again).

    def __init__(self, config: GameConfig, field: TileField, rafts: RaftSystem):
        self.config = config
        self.field = field
        self.rafts = rafts
        self.column: float = float(config.spawn_column)
        self.row: int = config.spawn_row
        self.state = PlayerState.ALIVE
        self.score = 0
        self.highest_row = config.spawn_row
        self.death_cause: Optional[str] = None

    @property
    def is_dead(self) -> bool:
        return self.state is PlayerState.DEAD

    @property
    def grid_column(self) -> int:
        return snap_column(self.column)

    @property
    def camera_row(self) -> int:
        return self.row - self.config.tiles_ahead

    def raft_under(self) -> Optional[Raft]:
        # Player centre against the raft's open interval.
        return self.rafts.raft_at(self.row, self.column + 0.5)

    def move(self, dx: int, dy: int) -> bool:
        if (dx, dy) not in MOVES:
            raise ValueError(f"invalid move ({dx}, {dy})")
        if self.is_dead:
            return False

        # Hops always start from (and land on) the grid.
        new_col = self.grid_column + dx
        new_row = self.row + dy
        if not self.config.in_bounds(new_col):
            return False

        self.field.ensure_row(new_row)
        kind = self.field.kind_at(new_col, new_row)
        if kind is TileKind.ROCK:
            return False

        self.column = float(new_col)
        self.row = new_row

        # Water: land on a raft or drown
        if kind is TileKind.WATER and self.raft_under() is None:
            self._die("drowned")
            return True

        if dy < 0 and self.row < self.highest_row:
            self.score += 1
            self.highest_row = self.row
            self._advance_window()
        return True

    def tick(self):
        if self.is_dead:
            return
        if self.field.kind_at(self.grid_column, self.row) is not TileKind.WATER:
            return

        raft = self.raft_under()
        if raft is None:
            self._die("drowned")
            return

        self.column += raft.velocity

        # Carried off the edge of the field
        if self.column < -0.5 or self.column >= self.config.width - 0.5:
            self._die("swept away")

    def _advance_window(self):
        # Generate a couple of rows past the top of the screen, drop rows well behind.
        target = self.camera_row - self.config.generate_margin
        added = self.field.extend_to(target)
        evicted = self.field.evict_after(self.row + self.config.tiles_behind + self.config.evict_margin)
        logger.debug("row %d: +%d rows, -%d rows", self.row, added, evicted)

    def _die(self, cause: str):
        self.state = PlayerState.DEAD
        self.death_cause = cause
        logger.info("player %s at column %.2f row %d (score %d)", cause, self.column, self.row, self.score)
