"""
view.py — View layer.

Draws one frame from a model Snapshot. Never mutates game state.

  - Pre-rendered grid surface (drawn once, blitted every frame)
  - Neon glow behind walls, food and the snake head
  - White head, green body
  - Particles faded by their remaining life
  - HUD panel: score, best score, START / RESTART / TRY AGAIN button
  - Game-over overlay with the final score

Public API:
    GameView(screen)       — bind to a pygame surface
    view.render(snapshot)  — draw the current frame
    view.button_rect       — screen rect of the start button (for clicks)
"""

import math
import pygame

from .config import (
    WIDTH, PANEL_H, GAME_W, GAME_H,
    OFFSET_X, OFFSET_Y, CELL, GRID_SIZE,
    BG, GRID_COL, WALL_COL, FOOD_COL, SNAKE_COL, HEAD_COL,
    UI_COL, TEXT_COL, PANEL_BG, BORDER_COL,
    STATE_NOT_STARTED, STATE_RUNNING, STATE_OVER,
)
from .model import Particle, Snapshot

BUTTON_LABELS = {
    STATE_NOT_STARTED: "START",
    STATE_RUNNING:     "RESTART",
    STATE_OVER:        "TRY AGAIN",
}


# ─────────────────────── colour helpers ──────────────────────────
def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def _brighten(color: tuple, factor: float) -> tuple:
    return tuple(min(255, int(c * factor)) for c in color[:3])


def _cell_rect(cell: tuple[int, int]) -> pygame.Rect:
    x, y = cell
    return pygame.Rect(OFFSET_X + x * CELL, OFFSET_Y + y * CELL, CELL - 2, CELL - 2)


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a Snapshot."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_fonts()
        self._build_static_surfaces()
        self.button_rect = pygame.Rect(0, 0, 130, 32)
        self.button_rect.center = (WIDTH // 2, PANEL_H // 2)
        self._anim_tick: int = 0

    # ── Main entry ───────────────────────────────────────────────
    def render(self, snap: Snapshot) -> None:
        self._anim_tick += 1

        self.screen.fill(BG)
        self.screen.blit(self._grid_surf, (OFFSET_X, OFFSET_Y))

        self._draw_walls(snap.walls)
        if snap.food is not None:
            self._draw_food(snap.food)
        self._draw_snake(snap.snake)
        self._draw_particles(snap.particles)

        self._draw_border()
        self._draw_panel(snap)

        if snap.state == STATE_OVER:
            self._draw_game_over_overlay(snap)

        pygame.display.flip()

    # ── Static surface pre-builds ─────────────────────────────────
    def _build_static_surfaces(self) -> None:
        self._grid_surf = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        for x in range(GRID_SIZE + 1):
            pygame.draw.line(self._grid_surf, GRID_COL,
                             (x * CELL, 0), (x * CELL, GAME_H))
        for y in range(GRID_SIZE + 1):
            pygame.draw.line(self._grid_surf, GRID_COL,
                             (0, y * CELL), (GAME_W, y * CELL))

        self._wall_glow = self._build_glow(WALL_COL, 10)
        self._food_glow = self._build_glow(FOOD_COL, 15)
        self._head_glow = self._build_glow(SNAKE_COL, 10)

    @staticmethod
    def _build_glow(color: tuple, blur: int) -> pygame.Surface:
        """Soft square halo one tile wide plus `blur` pixels on each side."""
        size = CELL + 2 * blur
        glow = pygame.Surface((size, size), pygame.SRCALPHA)
        for i in range(blur):
            a = int(70 * ((i + 1) / blur) ** 2)
            pygame.draw.rect(glow, _with_alpha(color, a),
                             (i, i, size - 2 * i, size - 2 * i), 1,
                             border_radius=blur - i)
        return glow

    def _blit_glow(self, glow: pygame.Surface, rect: pygame.Rect) -> None:
        offset = (glow.get_width() - CELL) // 2
        self.screen.blit(glow, (rect.x - offset, rect.y - offset),
                         special_flags=pygame.BLEND_RGBA_ADD)

    # ── Board content ─────────────────────────────────────────────
    def _draw_walls(self, walls) -> None:
        for cell in walls:
            rect = _cell_rect(cell)
            self._blit_glow(self._wall_glow, rect)
            pygame.draw.rect(self.screen, WALL_COL, rect)

    def _draw_food(self, food: tuple[int, int]) -> None:
        rect = _cell_rect(food)
        pulse = 0.85 + 0.15 * math.sin(self._anim_tick * 0.10)
        self._blit_glow(self._food_glow, rect)
        pygame.draw.rect(self.screen, _brighten(FOOD_COL, pulse), rect)

    def _draw_snake(self, body: tuple) -> None:
        if not body:
            return
        self._blit_glow(self._head_glow, _cell_rect(body[0]))
        # Tail first so the head is always on top.
        for i in range(len(body) - 1, -1, -1):
            color = HEAD_COL if i == 0 else SNAKE_COL
            pygame.draw.rect(self.screen, color, _cell_rect(body[i]))

    def _draw_particles(self, particles: tuple[Particle, ...]) -> None:
        for p in particles:
            size = max(1, int(p.size))
            s = pygame.Surface((size, size), pygame.SRCALPHA)
            s.fill(_with_alpha(p.color, int(min(1.0, p.life) * 255)))
            self.screen.blit(s, (OFFSET_X + int(p.x * CELL), OFFSET_Y + int(p.y * CELL)))

    def _draw_border(self) -> None:
        pygame.draw.rect(self.screen, BORDER_COL,
                         (OFFSET_X - 1, OFFSET_Y - 1, GAME_W + 2, GAME_H + 2), 1)

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, snap: Snapshot) -> None:
        pygame.draw.rect(self.screen, PANEL_BG, (0, 0, WIDTH, PANEL_H))
        pygame.draw.line(self.screen, BORDER_COL,
                         (0, PANEL_H - 1), (WIDTH, PANEL_H - 1), 1)

        self.screen.blit(self.font_small.render("SCORE", True, UI_COL), (16, 8))
        self.screen.blit(self.font_big.render(str(snap.score), True, SNAKE_COL), (16, 24))

        best_label = self.font_small.render("HIGH SCORE", True, UI_COL)
        best_value = self.font_big.render(str(snap.high_score), True, FOOD_COL)
        self.screen.blit(best_label, best_label.get_rect(topright=(WIDTH - 16, 8)))
        self.screen.blit(best_value, best_value.get_rect(topright=(WIDTH - 16, 24)))

        self._draw_button(BUTTON_LABELS[snap.state], SNAKE_COL)

    def _draw_button(self, label: str, color: tuple) -> None:
        rect = self.button_rect
        bg = pygame.Surface(rect.size, pygame.SRCALPHA)
        bg.fill(_with_alpha(color, 22))
        self.screen.blit(bg, rect.topleft)
        pygame.draw.rect(self.screen, color, rect, 2, border_radius=4)
        txt = self.font_small.render(label, True, color)
        self.screen.blit(txt, txt.get_rect(center=rect.center))

    # ── Overlay ───────────────────────────────────────────────────
    def _draw_game_over_overlay(self, snap: Snapshot) -> None:
        surf = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        surf.fill((0, 0, 0, 178))
        self.screen.blit(surf, (OFFSET_X, OFFSET_Y))

        cx = OFFSET_X + GAME_W // 2
        cy = OFFSET_Y + GAME_H // 2
        title = self.font_title.render("GAME OVER", True, TEXT_COL)
        self.screen.blit(title, title.get_rect(center=(cx, cy)))
        score = self.font_med.render(f"Score: {snap.score}", True, TEXT_COL)
        self.screen.blit(score, score.get_rect(center=(cx, cy + 40)))

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        specs = [
            ("font_title", "couriernew", 40, True),
            ("font_big",   "couriernew", 22, True),
            ("font_med",   "couriernew", 20, False),
            ("font_small", "couriernew", 13, True),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except (pygame.error, OSError):
                setattr(self, attr, pygame.font.Font(None, size))
