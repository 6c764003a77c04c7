"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

Classes:
    Direction       — immutable (dx, dy) value object
    Snake           — body (head first), committed and buffered direction
    Particle        — visual effect data (position, velocity, life)
    ParticleTracker — burst/update/cull of particles, cosmetic only
    Snapshot        — read-only view of one frame for the renderer
    TickResult      — what a single tick did
    GameModel       — top-level model; owns snake, walls, food, score
"""

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional

from .config import (
    GRID_SIZE, WALL_COUNT, START_LENGTH, FOOD_SCORE, FOOD_COL,
    PARTICLE_COUNT, PARTICLE_DECAY, PARTICLE_SPEED, PARTICLE_SIZE,
    STATE_NOT_STARTED, STATE_RUNNING, STATE_OVER,
)
from .grid import Cell, wrap_cell
from .highscore import MemoryHighScoreStore
from .placement import generate_walls, place_food

log = logging.getLogger(__name__)


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


Direction.LEFT  = Direction(-1,  0)
Direction.RIGHT = Direction( 1,  0)
Direction.UP    = Direction( 0, -1)
Direction.DOWN  = Direction( 0,  1)


def swipe_direction(dx: float, dy: float) -> Optional[Direction]:
    """
    Map a swipe displacement to a direction by its dominant axis.
    Screen y grows downwards. Returns None for a zero displacement.
    """
    if dx == 0 and dy == 0:
        return None
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


# ──────────────────────────── Snake ──────────────────────────────
class Snake:
    """
    Ordered body cells, head first.
    No rendering. No input handling. No knowledge of walls or food.
    """

    def __init__(self, cells: list[Cell], direction: Direction):
        if not cells:
            raise ValueError("a snake needs at least one cell")
        self.body: deque[Cell] = deque(cells)
        self.dir: Direction = direction
        self._next_dir: Direction = direction

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> Cell:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.body)

    # ── Commands ─────────────────────────────────────────────────
    def request_direction(self, new_dir: Direction) -> bool:
        """
        Buffer a direction change. Rejected if it reverses the committed
        direction; later legal requests overwrite earlier ones.
        """
        if new_dir.is_opposite(self.dir):
            return False
        self._next_dir = new_dir
        return True

    def commit_direction(self) -> Direction:
        self.dir = self._next_dir
        return self.dir

    def next_head(self, size: int) -> Cell:
        hx, hy = self.head
        return wrap_cell((hx + self.dir.x, hy + self.dir.y), size)

    def advance(self, new_head: Cell, grow: bool) -> None:
        self.body.appendleft(new_head)
        if not grow:
            self.body.pop()

    # ── Queries ──────────────────────────────────────────────────
    def occupies(self, cell: Cell) -> bool:
        return cell in self.body


# ─────────────────────────── Particle ────────────────────────────
class Particle:
    """Visual-only data in grid units; updated per frame, rendered by the view."""

    def __init__(self, x: float, y: float, vx: float, vy: float,
                 color: tuple, size: float, life: float = 1.0):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.life = life
        self.color = color
        self.size = size

    @property
    def alive(self) -> bool:
        return self.life > 0

    def update(self) -> None:
        self.x += self.vx
        self.y += self.vy
        self.life -= PARTICLE_DECAY


class ParticleTracker:
    """Live particles. Never read by the simulation tick."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._particles: list[Particle] = []

    def burst(self, cell: Cell, color: tuple = FOOD_COL,
              count: int = PARTICLE_COUNT) -> None:
        rng = self._rng
        cx, cy = cell[0] + 0.5, cell[1] + 0.5
        for _ in range(count):
            self._particles.append(Particle(
                cx, cy,
                (rng.random() - 0.5) * PARTICLE_SPEED,
                (rng.random() - 0.5) * PARTICLE_SPEED,
                color,
                rng.uniform(*PARTICLE_SIZE),
            ))

    def update(self) -> None:
        """Advance every particle, then drop the expired ones."""
        for p in self._particles:
            p.update()
        self._particles = [p for p in self._particles if p.alive]

    def clear(self) -> None:
        self._particles = []

    def __len__(self) -> int:
        return len(self._particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)


# ─────────────────────── Snapshot / results ──────────────────────
@dataclass(frozen=True)
class Snapshot:
    state: str
    walls: frozenset
    food: Optional[Cell]
    snake: tuple
    particles: tuple
    score: int
    high_score: int


@dataclass(frozen=True)
class TickResult:
    ticked: bool = False
    ate: bool = False
    game_over: bool = False
    snapshot: Optional[Snapshot] = None


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model.  Owns all game state.
    The controller calls tick() once per scheduler period and
    particles.update() once per rendered frame.
    """

    def __init__(self, grid_size: int = GRID_SIZE, wall_count: int = WALL_COUNT,
                 highscores=None, rng: Optional[random.Random] = None):
        self.size = grid_size
        self.wall_count = wall_count
        self.rng = rng or random.Random()
        self.highscores = highscores if highscores is not None else MemoryHighScoreStore()
        self.high_score: int = self.highscores.load()

        self.state: str = STATE_NOT_STARTED
        self.score: int = 0
        self.snake: Snake = None
        self.walls: frozenset[Cell] = frozenset()
        self.food: Optional[Cell] = None
        self.particles = ParticleTracker(self.rng)
        self.ticks: int = 0
        self.reset()

    # ── Public API ───────────────────────────────────────────────
    @property
    def running(self) -> bool:
        return self.state == STATE_RUNNING

    @property
    def direction(self) -> Direction:
        return self.snake.dir

    def start(self) -> bool:
        """Begin a new game. No-op while a game is running."""
        if self.running:
            return False
        self.reset()
        self.state = STATE_RUNNING
        log.info("game started: %d walls, food at %s", len(self.walls), self.food)
        return True

    def reset(self) -> None:
        """Lay out a fresh board: snake, walls, food; score and particles cleared."""
        x = self.size // 2
        y = (3 * self.size) // 4
        cells = [wrap_cell((x, y + i), self.size) for i in range(START_LENGTH)]
        self.snake = Snake(cells, Direction.UP)
        self.score = 0
        self.ticks = 0
        self.particles.clear()
        self.walls = generate_walls(self.snake, self.wall_count, self.size, self.rng)
        self.food = place_food(self.snake, self.walls, self.size, self.rng)

    def propose_direction(self, direction: Direction) -> bool:
        """Queue a turn for the next tick. Ignored when idle or reversing."""
        if not self.running:
            return False
        return self.snake.request_direction(direction)

    def propose_swipe(self, start: tuple, end: tuple) -> bool:
        direction = swipe_direction(end[0] - start[0], end[1] - start[1])
        if direction is None:
            return False
        return self.propose_direction(direction)

    def tick(self) -> TickResult:
        """Advance the simulation by one cell. Does nothing unless running."""
        if not self.running:
            return TickResult()

        self.ticks += 1
        self.snake.commit_direction()
        head = self.snake.next_head(self.size)

        if head in self.walls or self.snake.occupies(head):
            self._game_over("wall" if head in self.walls else "self")
            return TickResult(ticked=True, game_over=True, snapshot=self.snapshot())

        ate = head == self.food
        self.snake.advance(head, grow=ate)

        if ate:
            self.score += FOOD_SCORE
            self.particles.burst(head)
            self.food = place_food(self.snake, self.walls, self.size, self.rng)
            if self.food is None:
                self._game_over("board full")
                return TickResult(ticked=True, ate=True, game_over=True,
                                  snapshot=self.snapshot())

        return TickResult(ticked=True, ate=ate, snapshot=self.snapshot())

    def snapshot(self) -> Snapshot:
        return Snapshot(
            state=self.state,
            walls=self.walls,
            food=self.food,
            snake=tuple(self.snake.body),
            particles=tuple(self.particles),
            score=self.score,
            high_score=self.high_score,
        )

    # ── Private helpers ──────────────────────────────────────────
    def _game_over(self, cause: str) -> None:
        self.state = STATE_OVER
        log.info("game over (%s) after %d ticks, score %d", cause, self.ticks, self.score)
        if self.score > self.high_score:
            self.high_score = self.score
            self.highscores.save(self.high_score)
            log.info("new high score %d", self.high_score)
