"""
pygame host for River Hop.

Draws GameSession snapshots and turns key presses into movement intents.

Controls:
- Arrow keys / WASD: move
- R: restart
- Any key after game over: restart
- Esc: quit
"""

import logging
import sys
from typing import Optional

import pygame

from .rafts import Raft
from .session import Direction, GameSession, GameSnapshot
from .tiles import Tile, TileKind

logger = logging.getLogger(__name__)


# ----------------------------- Config -----------------------------

FPS = 60
TILE = 40

COL_BG = (52, 73, 94)
COL_GRASS = (46, 204, 113)
COL_ROCK = (149, 165, 166)
COL_WATER = (52, 152, 219)
COL_WATER_DARK = (45, 140, 200)
COL_GRID = (0, 0, 0, 26)
COL_LOG = (139, 69, 19)
COL_LOG_DARK = (109, 52, 12)
COL_PLAYER = (255, 255, 255)
COL_PLAYER_BEAK = (241, 196, 15)
COL_PLAYER_COMB = (231, 76, 60)
COL_PLAYER_EYE = (0, 0, 0)
COL_TEXT = (255, 255, 255)
COL_TEXT_DIM = (189, 195, 199)
COL_UI_BG = (30, 30, 30, 150)
COL_GAME_OVER = (231, 76, 60)

TILE_COLORS = {
    TileKind.GRASS: COL_GRASS,
    TileKind.ROCK: COL_ROCK,
    TileKind.WATER: COL_WATER,
}

KEY_DIRECTIONS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_UP: Direction.FORWARD,
    pygame.K_w: Direction.FORWARD,
    pygame.K_DOWN: Direction.BACKWARD,
    pygame.K_s: Direction.BACKWARD,
}


# ----------------------------- Game -----------------------------

class Game:
    def __init__(self, session: GameSession):
        self.session = session
        cfg = session.config

        pygame.init()
        pygame.display.set_caption("River Hop")
        self.window_w = cfg.width * TILE
        self.window_h = (cfg.tiles_ahead + cfg.tiles_behind + 1) * TILE
        self.screen = pygame.display.set_mode((self.window_w, self.window_h))
        self.clock = pygame.time.Clock()

        self.font = pygame.font.SysFont("consolas", 22)
        self.font_small = pygame.font.SysFont("consolas", 14)
        self.font_big = pygame.font.SysFont("consolas", 48, bold=True)

        self.grid_cell = pygame.Surface((TILE, TILE), pygame.SRCALPHA)
        pygame.draw.rect(self.grid_cell, COL_GRID, self.grid_cell.get_rect(), width=1)

        # One hop per key press: cleared again on key release.
        self.moved = False

    def run(self):
        while True:
            self.clock.tick(FPS)
            self._handle_events()
            self.session.tick()
            self._draw(self.session.snapshot())

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()

            if event.type == pygame.KEYUP:
                self.moved = False

            if event.type != pygame.KEYDOWN:
                continue

            if event.key == pygame.K_ESCAPE:
                self._quit()

            # Any key restarts once the game is over
            if self.session.is_game_over or event.key == pygame.K_r:
                self.session.restart()
                continue

            direction = KEY_DIRECTIONS.get(event.key)
            if direction is not None and not self.moved:
                self.session.handle_intent(direction)
                self.moved = True

    # ----------------------------- Drawing -----------------------------

    def _screen_y(self, row: int, camera_row: int) -> int:
        return (row - camera_row) * TILE

    def _visible(self, y: int) -> bool:
        return -TILE <= y <= self.window_h

    def _draw(self, snap: GameSnapshot):
        self.screen.fill(COL_BG)

        for tile in snap.tiles:
            self._draw_tile(tile, snap.camera_row)
        for raft in snap.rafts:
            self._draw_raft(raft, snap.camera_row)
        self._draw_player(snap)
        self._draw_ui(snap)

        pygame.display.flip()

    def _draw_tile(self, tile: Tile, camera_row: int):
        y = self._screen_y(tile.row, camera_row)
        if not self._visible(y):
            return
        r = pygame.Rect(tile.column * TILE, y, TILE, TILE)
        pygame.draw.rect(self.screen, TILE_COLORS[tile.kind], r)
        if tile.kind is TileKind.WATER:
            pygame.draw.ellipse(self.screen, COL_WATER_DARK, (r.x + 6, r.y + 10, TILE - 12, 6))

        self.screen.blit(self.grid_cell, r.topleft)

    def _draw_raft(self, raft: Raft, camera_row: int):
        y = self._screen_y(raft.row, camera_row)
        if not self._visible(y):
            return
        r = pygame.Rect(int(raft.position * TILE), y + 4, raft.width * TILE, TILE - 8)
        pygame.draw.rect(self.screen, COL_LOG, r, border_radius=6)

        # Wood grain
        for i in range(2):
            line_y = r.y + (i + 1) * r.h // 3
            pygame.draw.line(self.screen, COL_LOG_DARK, (r.x + 4, line_y), (r.right - 4, line_y), 2)

    def _draw_player(self, snap: GameSnapshot):
        px = int(snap.player.column * TILE)
        py = self._screen_y(snap.player.row, snap.camera_row)
        cx, cy = px + TILE // 2, py + TILE // 2
        radius = TILE // 2 - 5

        # Body
        pygame.draw.circle(self.screen, COL_PLAYER, (cx, cy), radius)

        # Comb on top
        top = cy - radius
        for ox, oy in ((-5, -2), (0, -4), (5, -2)):
            pygame.draw.circle(self.screen, COL_PLAYER_COMB, (cx + ox, top + oy), 4)

        # Eyes
        for ox in (-8, 8):
            pygame.draw.circle(self.screen, (255, 255, 255), (cx + ox, cy - 5), 3)
            pygame.draw.circle(self.screen, COL_PLAYER_EYE, (cx + ox, cy - 5), 1)

        # Beak
        pygame.draw.polygon(self.screen, COL_PLAYER_BEAK, [(cx - 4, cy - 2), (cx + 4, cy - 2), (cx, cy + 4)])

    def _draw_ui(self, snap: GameSnapshot):
        hud = pygame.Surface((220, 56), pygame.SRCALPHA)
        pygame.draw.rect(hud, COL_UI_BG, hud.get_rect(), border_radius=12)
        self.screen.blit(hud, (10, 10))

        score_txt = self.font.render(f"SCORE {snap.score}", True, COL_TEXT)
        best_txt = self.font.render(f"BEST  {snap.high_score}", True, COL_TEXT_DIM)
        self.screen.blit(score_txt, (20, 14))
        self.screen.blit(best_txt, (20, 38))

        row_txt = self.font_small.render(f"Row: {-snap.player.row}", True, COL_TEXT)
        self.screen.blit(row_txt, (10, self.window_h - 20))

        if snap.is_game_over:
            overlay = pygame.Surface((self.window_w, self.window_h), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 190))
            self.screen.blit(overlay, (0, 0))

            lines = [
                (self.font_big, "GAME OVER", COL_GAME_OVER, -60),
                (self.font, f"Current Score: {snap.score}", COL_TEXT, 0),
                (self.font, f"High Score: {snap.high_score}", COL_TEXT, 40),
                (self.font, "Press any key to restart", COL_TEXT_DIM, 100),
            ]
            for font, text, color, dy in lines:
                surf = font.render(text, True, color)
                x = (self.window_w - surf.get_width()) // 2
                y = self.window_h // 2 + dy - surf.get_height() // 2
                self.screen.blit(surf, (x, y))

    def _quit(self):
        logger.info("quitting (high score %d)", self.session.high_score)
        pygame.quit()
        sys.exit(0)


def run(session: Optional[GameSession] = None):
    Game(session or GameSession()).run()
