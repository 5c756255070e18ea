import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass
class Raft:
    # position is the continuous column of the raft's left edge.
    position: float
    row: int
    width: int
    direction: int  # +1 right, -1 left
    speed: float  # tiles/tick magnitude

    @property
    def velocity(self) -> float:
        return self.speed * self.direction

    def supports(self, x: float) -> bool:
        # Strict on both edges: standing exactly on an edge is not supported.
        return self.position < x < self.position + self.width


class RaftSystem:
    """Owns every raft in the field, indexed by row."""

    def __init__(self, field_width: int):
        if field_width < 1:
            raise ValueError(f"field_width must be positive, got {field_width}")
        self.field_width = field_width
        self._by_row: Dict[int, List[Raft]] = {}

    def __len__(self) -> int:
        return sum(len(rafts) for rafts in self._by_row.values())

    @property
    def rafts(self) -> Tuple[Raft, ...]:
        return tuple(r for row in sorted(self._by_row) for r in self._by_row[row])

    def on_row(self, row: int) -> Tuple[Raft, ...]:
        return tuple(self._by_row.get(row, ()))

    def add(self, rafts: Iterable[Raft]):
        for raft in rafts:
            self._by_row.setdefault(raft.row, []).append(raft)

    def advance(self):
        for rafts in self._by_row.values():
            for raft in rafts:
                raft.position += raft.velocity

                # Wrap around the field edges
                if raft.direction == 1 and raft.position >= self.field_width:
                    raft.position = float(-raft.width)
                elif raft.direction == -1 and raft.position + raft.width <= 0:
                    raft.position = float(self.field_width)

    def raft_at(self, row: int, x: float) -> Optional[Raft]:
        for raft in self._by_row.get(row, ()):
            if raft.supports(x):
                return raft
        return None

    def evict_rows_after(self, max_row: int) -> int:
        stale = [row for row in self._by_row if row > max_row]
        removed = 0
        for row in stale:
            removed += len(self._by_row.pop(row))
        if removed:
            logger.debug("evicted %d rafts on rows > %d", removed, max_row)
        return removed

    def clear(self):
        self._by_row.clear()
