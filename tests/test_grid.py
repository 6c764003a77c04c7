import random

import pytest

from wallsnake.grid import all_cells, manhattan, random_cell, wrap, wrap_cell


@pytest.mark.parametrize("coord", [-41, -20, -1, 0, 7, 19, 20, 21, 399])
def test_wrap_lands_on_board_and_is_idempotent(coord):
    wrapped = wrap(coord, 20)
    assert 0 <= wrapped < 20
    assert wrap(wrapped, 20) == wrapped


def test_wrap_edges():
    assert wrap(20, 20) == 0
    assert wrap(-1, 20) == 19


def test_wrap_cell_wraps_both_axes():
    assert wrap_cell((20, -1), 20) == (0, 19)
    assert wrap_cell((5, 5), 20) == (5, 5)


def test_manhattan():
    assert manhattan((10, 15), (10, 12)) == 3
    assert manhattan((0, 0), (2, 1)) == 3


def test_random_cell_stays_on_board():
    rng = random.Random(7)
    for _ in range(500):
        x, y = random_cell(6, rng)
        assert 0 <= x < 6 and 0 <= y < 6


def test_all_cells_covers_board_once():
    cells = list(all_cells(4))
    assert len(cells) == 16
    assert len(set(cells)) == 16
