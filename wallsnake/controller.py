"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate raw keyboard, touch and mouse events into model commands.
  - Drive the game loop: run the ticks the scheduler reports as due,
    decay particles once per frame, ask the view to render.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

Swipes:
  - A finger (or mouse button) going down and up again is a swipe; the
    dominant axis of the displacement picks the direction.
  - Releases shorter than SWIPE_MIN_PX are treated as taps; a tap on the
    start button starts a new game.

The controller is the only layer that imports pygame directly for events.
"""

import logging
import sys
import pygame

from .config import WIDTH, HEIGHT, FPS
from .highscore import HighScoreStore
from .model import Direction, GameModel
from .scheduler import TickScheduler
from .view import GameView

log = logging.getLogger(__name__)

SWIPE_MIN_PX = 10

DIRECTION_KEYS = {
    pygame.K_UP:    Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w:     Direction.UP,
    pygame.K_s:     Direction.DOWN,
    pygame.K_a:     Direction.LEFT,
    pygame.K_d:     Direction.RIGHT,
}
START_KEYS = (pygame.K_SPACE, pygame.K_RETURN)


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(self, model: GameModel = None):
        pygame.init()
        self.screen    = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("WALLSNAKE")
        self.clock     = pygame.time.Clock()
        self.model     = model or GameModel(highscores=HighScoreStore())
        self.view      = GameView(self.screen)
        self.scheduler = TickScheduler()
        self._press_pos = None

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        log.info("high score on record: %d", self.model.high_score)
        while True:
            dt = self.clock.tick(FPS) / 1000.0
            self._handle_events()
            self._run_due_ticks(dt)
            self.model.particles.update()
            self.view.render(self.model.snapshot())

    # ── Game lifecycle ────────────────────────────────────────────
    def _start(self) -> None:
        if self.model.start():
            self.scheduler.start()

    def _run_due_ticks(self, dt: float) -> None:
        for _ in range(self.scheduler.advance(dt)):
            result = self.model.tick()
            if result.game_over:
                self.scheduler.stop()
                break

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)
            elif event.type == pygame.FINGERDOWN:
                self._press_pos = (event.x * WIDTH, event.y * HEIGHT)
            elif event.type == pygame.FINGERUP:
                self._handle_release((event.x * WIDTH, event.y * HEIGHT))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if not getattr(event, "touch", False):
                    self._press_pos = event.pos
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                if not getattr(event, "touch", False):
                    self._handle_release(event.pos)

    def _handle_keydown(self, key: int) -> None:
        if key == pygame.K_q:
            self._quit()
        elif key in DIRECTION_KEYS:
            self.model.propose_direction(DIRECTION_KEYS[key])
        elif key in START_KEYS:
            self._start()

    def _handle_release(self, pos) -> None:
        start, self._press_pos = self._press_pos, None
        if start is None:
            return
        dx, dy = pos[0] - start[0], pos[1] - start[1]
        if max(abs(dx), abs(dy)) < SWIPE_MIN_PX:
            if self.view.button_rect.collidepoint(pos):
                self._start()
            return
        self.model.propose_swipe(start, pos)

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        pygame.quit()
        sys.exit()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    GameController().run()
