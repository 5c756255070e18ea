import dataclasses
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .config import GameConfig
from .field import TileField
from .player import PlayerController
from .rafts import Raft, RaftSystem
from .tiles import Tile, WaterRowMeta

logger = logging.getLogger(__name__)


class Direction(Enum):
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    FORWARD = (0, -1)  # forward is decreasing row
    BACKWARD = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class PlayerView:
    column: float
    row: int
    is_dead: bool


@dataclass(frozen=True)
class GameSnapshot:
    tiles: Tuple[Tile, ...]
    rafts: Tuple[Raft, ...]
    water_rows: Tuple[WaterRowMeta, ...]
    player: PlayerView
    camera_row: int
    score: int
    high_score: int
    highest_row: int
    is_game_over: bool


class GameSession:
    """One game world: field, rafts and player, plus the session high score.

    The host calls handle_intent() for each key press, tick() once per frame
    and draws snapshot(). restart() throws the world away but keeps the high
    score.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random()
        self.high_score = 0
        self.rafts = RaftSystem(self.config.width)
        self.field = TileField(self.config, self.rafts, self.rng)
        self.player = PlayerController(self.config, self.field, self.rafts)
        self._populate()

    @property
    def is_game_over(self) -> bool:
        return self.player.is_dead

    @property
    def score(self) -> int:
        return self.player.score

    @property
    def camera_row(self) -> int:
        return self.player.camera_row

    def restart(self):
        self.field.clear()
        self.player = PlayerController(self.config, self.field, self.rafts)
        self._populate()
        logger.info("restarted (high score %d)", self.high_score)

    def handle_intent(self, direction: Direction) -> bool:
        if not isinstance(direction, Direction):
            raise ValueError(f"unknown intent {direction!r}")
        moved = self.player.move(direction.dx, direction.dy)
        self._record_score()
        return moved

    def tick(self):
        # Everything freezes once the player is dead.
        if self.is_game_over:
            return
        self.rafts.advance()
        self.player.tick()
        self._record_score()

    def snapshot(self) -> GameSnapshot:
        p = self.player
        return GameSnapshot(
            tiles=tuple(self.field.tiles()),
            rafts=tuple(dataclasses.replace(r) for r in self.rafts.rafts),
            water_rows=self.field.water_rows(),
            player=PlayerView(column=p.column, row=p.row, is_dead=p.is_dead),
            camera_row=p.camera_row,
            score=p.score,
            high_score=self.high_score,
            highest_row=p.highest_row,
            is_game_over=self.is_game_over,
        )

    def _populate(self):
        # Same window the player keeps while advancing: a few rows behind,
        # up to two rows past the top of the screen.
        p = self.player
        nearest = p.row + self.config.tiles_behind + self.config.evict_margin
        farthest = p.camera_row - self.config.generate_margin
        self.field.populate(nearest, farthest)

    def _record_score(self):
        if self.player.score > self.high_score:
            self.high_score = self.player.score
