"""
placement.py — Level element placement.

Completely isolated from rendering and input.
Receives read-only snapshots of the board and returns new cells.

Strategy:
  - Rejection sampling: draw uniform random cells until one satisfies
    every placement rule.
  - After MAX_PLACEMENT_ATTEMPTS draws, materialize the set of cells that
    are still valid and pick from it, so placement always terminates.
"""

import logging
import random
from typing import Callable, Iterable, Optional

from .config import MAX_PLACEMENT_ATTEMPTS, WALL_SAFE_DISTANCE
from .grid import Cell, all_cells, manhattan, random_cell

log = logging.getLogger(__name__)


class PlacementError(ValueError):
    """Raised when the board cannot hold the requested walls."""


def generate_walls(
    snake: Iterable[Cell],
    count: int,
    size: int,
    rng: random.Random,
    safe_distance: int = WALL_SAFE_DISTANCE,
) -> frozenset[Cell]:
    """
    Return exactly `count` distinct wall cells.

    Parameters
    ----------
    snake         : current snake body, head first
    count         : number of walls wanted
    size          : grid side N
    rng           : random source
    safe_distance : walls closer than this (Manhattan) to the head are rejected
    """
    body = list(snake)
    head = body[0]
    occupied = set(body)
    walls: set[Cell] = set()

    def valid(cell: Cell) -> bool:
        return (
            cell not in occupied
            and cell not in walls
            and manhattan(cell, head) >= safe_distance
        )

    while len(walls) < count:
        cell = _sample(size, rng, valid)
        if cell is None:
            raise PlacementError(
                f"only {len(walls)} of {count} walls fit on a {size}x{size} grid"
            )
        walls.add(cell)

    return frozenset(walls)


def place_food(
    snake: Iterable[Cell],
    walls: Iterable[Cell],
    size: int,
    rng: random.Random,
) -> Optional[Cell]:
    """Return an empty cell for the food, or None if the board is full."""
    blocked = set(snake) | set(walls)
    return _sample(size, rng, lambda cell: cell not in blocked)


# ── Internal helpers ──────────────────────────────────────────────

def _sample(
    size: int,
    rng: random.Random,
    valid: Callable[[Cell], bool],
) -> Optional[Cell]:
    for _ in range(MAX_PLACEMENT_ATTEMPTS):
        cell = random_cell(size, rng)
        if valid(cell):
            return cell

    # Crowded board: pick from what is left instead of retrying forever.
    candidates = [cell for cell in all_cells(size) if valid(cell)]
    log.debug("rejection sampling exhausted, %d valid cells left", len(candidates))
    if not candidates:
        return None
    return rng.choice(candidates)
