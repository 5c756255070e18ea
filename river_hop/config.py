from dataclasses import dataclass
from typing import Tuple


# ----------------------------- Config -----------------------------

# Grid: each "tile" is a hop.
GRID_COLS = 20

# Rows kept ahead of / behind the player. The camera sits AHEAD_ROWS above
# the player, and two extra rows are generated past the top of the screen.
AHEAD_ROWS = 10
BEHIND_ROWS = 3
GENERATE_MARGIN = 2
# Extra rows kept behind the trailing window before eviction
EVICT_MARGIN = 2

# Rows behind spawn (inclusive range) that are a solid rock wall.
ROCK_BAND = (1, 5)

# Row type odds
WATER_ROW_CHANCE = 0.2
ROCK_TILE_CHANCE = 0.35

# Rafts: speeds are in tiles/tick; direction determined separately
RAFT_SPEED_RANGE = (0.02, 0.05)
RAFT_COUNT_RANGE = (2, 4)
RAFT_WIDTHS = (2, 3)

# How far back connectivity repair looks for a land row
LOOKBACK_DEPTH = 5


@dataclass(frozen=True)
class GameConfig:
    width: int = GRID_COLS
    tiles_ahead: int = AHEAD_ROWS
    tiles_behind: int = BEHIND_ROWS
    generate_margin: int = GENERATE_MARGIN
    evict_margin: int = EVICT_MARGIN
    rock_band: Tuple[int, int] = ROCK_BAND
    water_chance: float = WATER_ROW_CHANCE
    rock_chance: float = ROCK_TILE_CHANCE
    raft_speed_range: Tuple[float, float] = RAFT_SPEED_RANGE
    raft_count_range: Tuple[int, int] = RAFT_COUNT_RANGE
    raft_widths: Tuple[int, ...] = RAFT_WIDTHS
    lookback_depth: int = LOOKBACK_DEPTH
    # False gives the classic variant: no rafts, so water always kills.
    rafts_enabled: bool = True

    def __post_init__(self):
        if self.width < 1:
            raise ValueError(f"width must be positive, got {self.width}")
        for name in ("tiles_ahead", "tiles_behind", "generate_margin", "evict_margin"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")
        lo, hi = self.rock_band
        if lo < 1 or hi < lo:
            raise ValueError(f"rock_band must be a non-empty range behind spawn, got {self.rock_band}")
        for name in ("water_chance", "rock_chance"):
            p = getattr(self, name)
            if not 0.0 <= p <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {p}")
        s_lo, s_hi = self.raft_speed_range
        if s_lo <= 0 or s_hi < s_lo:
            raise ValueError(f"invalid raft_speed_range {self.raft_speed_range}")
        c_lo, c_hi = self.raft_count_range
        if c_lo < 1 or c_hi < c_lo:
            raise ValueError(f"invalid raft_count_range {self.raft_count_range}")
        if not self.raft_widths or min(self.raft_widths) < 1:
            raise ValueError(f"invalid raft_widths {self.raft_widths}")
        if self.lookback_depth < 1:
            raise ValueError(f"lookback_depth must be positive, got {self.lookback_depth}")

    @property
    def spawn_column(self) -> int:
        return self.width // 2

    @property
    def spawn_row(self) -> int:
        return 0

    def in_bounds(self, column: int) -> bool:
        return 0 <= column < self.width

    def in_rock_band(self, row: int) -> bool:
        lo, hi = self.rock_band
        return lo <= row <= hi
