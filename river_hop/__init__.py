"""
River Hop - an endless lane-crossing game core.

The game world is a vertically scrolling grid of grass, rock and water rows.
Rows are generated ahead of the player as they advance and evicted behind
them, and every generated row is guaranteed crossable. Water rows carry
drifting log rafts that the player can ride.

The core has no display dependency: a host feeds it movement intents and
frame ticks and draws what GameSession.snapshot() returns. river_hop.app is
the pygame host.
"""

from .config import GameConfig
from .field import TileField
from .player import PlayerController, PlayerState
from .rafts import Raft, RaftSystem
from .rowgen import RowResult, generate_row
from .session import Direction, GameSession, GameSnapshot, PlayerView
from .tiles import Tile, TileKind, WaterRowMeta

__all__ = [
    "Direction",
    "GameConfig",
    "GameSession",
    "GameSnapshot",
    "PlayerController",
    "PlayerState",
    "PlayerView",
    "Raft",
    "RaftSystem",
    "RowResult",
    "Tile",
    "TileField",
    "TileKind",
    "WaterRowMeta",
    "generate_row",
]
