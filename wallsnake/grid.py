"""
grid.py — Toroidal coordinate space.

Pure helpers over (x, y) integer cells on an N x N board whose edges
wrap around. No state, no randomness of its own.
"""

import random
from typing import Iterator

Cell = tuple[int, int]


def wrap(coord: int, size: int) -> int:
    """Map any integer onto [0, size)."""
    return coord % size


def wrap_cell(cell: Cell, size: int) -> Cell:
    return wrap(cell[0], size), wrap(cell[1], size)


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def random_cell(size: int, rng: random.Random) -> Cell:
    return rng.randrange(size), rng.randrange(size)


def all_cells(size: int) -> Iterator[Cell]:
    for y in range(size):
        for x in range(size):
            yield x, y
