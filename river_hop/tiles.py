from dataclasses import dataclass
from enum import Enum


class TileKind(str, Enum):
    GRASS = "grass"
    ROCK = "rock"
    WATER = "water"


@dataclass(frozen=True)
class Tile:
    column: int
    row: int  # world row; forward is decreasing row
    kind: TileKind

    @property
    def walkable(self) -> bool:
        return self.kind is not TileKind.ROCK


@dataclass(frozen=True)
class WaterRowMeta:
    # Shared by every raft on the row so they drift in lockstep.
    row: int
    direction: int  # +1 right, -1 left
    speed: float  # tiles/tick magnitude
