from __future__ import annotations

import pygame

from river_hop.app import KEY_DIRECTIONS, TILE_COLORS
from river_hop.session import Direction
from river_hop.tiles import TileKind


def test_every_direction_has_arrow_and_wasd_keys() -> None:
    assert KEY_DIRECTIONS[pygame.K_UP] is Direction.FORWARD
    assert KEY_DIRECTIONS[pygame.K_w] is Direction.FORWARD
    assert KEY_DIRECTIONS[pygame.K_DOWN] is Direction.BACKWARD
    assert KEY_DIRECTIONS[pygame.K_s] is Direction.BACKWARD
    assert set(KEY_DIRECTIONS.values()) == set(Direction)


def test_every_tile_kind_has_a_color() -> None:
    assert set(TILE_COLORS) == set(TileKind)
