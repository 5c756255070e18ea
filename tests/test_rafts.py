from __future__ import annotations

import random

import pytest

from river_hop.rafts import Raft, RaftSystem


def test_advance_moves_by_speed_and_direction() -> None:
    system = RaftSystem(20)
    right = Raft(position=5.0, row=-3, width=3, direction=1, speed=0.03)
    left = Raft(position=5.0, row=-5, width=2, direction=-1, speed=0.05)
    system.add([right, left])

    system.advance()

    assert right.position == pytest.approx(5.03)
    assert left.position == pytest.approx(4.95)


def test_rightward_raft_wraps_to_left_of_field() -> None:
    system = RaftSystem(10)
    raft = Raft(position=9.99, row=-2, width=3, direction=1, speed=0.02)
    system.add([raft])

    system.advance()

    assert raft.position == -3


def test_leftward_raft_wraps_once_fully_off_screen() -> None:
    system = RaftSystem(10)
    raft = Raft(position=-1.99, row=-2, width=2, direction=-1, speed=0.02)
    system.add([raft])

    system.advance()

    assert raft.position == 10


def test_positions_stay_in_wrap_range() -> None:
    rng = random.Random(7)
    system = RaftSystem(15)
    rafts = [
        Raft(
            position=float(rng.randrange(15)),
            row=-i,
            width=rng.choice((2, 3)),
            direction=rng.choice((-1, 1)),
            speed=rng.uniform(0.02, 0.05),
        )
        for i in range(10)
    ]
    system.add(rafts)

    for _ in range(3000):
        system.advance()
        for raft in rafts:
            assert -raft.width <= raft.position <= 15


def test_raft_at_uses_strict_bounds() -> None:
    system = RaftSystem(20)
    raft = Raft(position=5.0, row=-4, width=3, direction=1, speed=0.03)
    system.add([raft])

    assert system.raft_at(-4, 6.5) is raft
    assert system.raft_at(-4, 5.01) is raft
    assert system.raft_at(-4, 5.0) is None
    assert system.raft_at(-4, 8.0) is None
    assert system.raft_at(-3, 6.5) is None


def test_evict_rows_after_drops_rows_behind() -> None:
    system = RaftSystem(20)
    system.add([
        Raft(position=0.0, row=r, width=2, direction=1, speed=0.02)
        for r in (-8, -4, 2, 3)
    ])

    assert system.evict_rows_after(-4) == 2
    assert [r.row for r in system.rafts] == [-8, -4]
    assert len(system) == 2


def test_field_width_must_be_positive() -> None:
    with pytest.raises(ValueError):
        RaftSystem(0)
