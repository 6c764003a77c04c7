import random

import pytest

from wallsnake.grid import all_cells, manhattan
from wallsnake.placement import PlacementError, generate_walls, place_food

START_SNAKE = [(10, 15), (10, 16), (10, 17)]


@pytest.mark.parametrize("seed", range(20))
def test_walls_avoid_snake_and_head_zone(seed):
    walls = generate_walls(START_SNAKE, 15, 20, random.Random(seed))
    assert len(walls) == 15
    for wall in walls:
        assert wall not in START_SNAKE
        assert manhattan(wall, START_SNAKE[0]) >= 3
        assert 0 <= wall[0] < 20 and 0 <= wall[1] < 20


def test_crowded_board_still_fills_every_valid_cell():
    snake = [(2, 2)]
    valid = {c for c in all_cells(5) if manhattan(c, (2, 2)) >= 3}
    walls = generate_walls(snake, len(valid), 5, random.Random(0))
    assert walls == valid


def test_too_many_walls_raises():
    with pytest.raises(PlacementError):
        generate_walls([(2, 2)], 13, 5, random.Random(0))


def test_zero_walls():
    assert generate_walls(START_SNAKE, 0, 20, random.Random(0)) == frozenset()


@pytest.mark.parametrize("seed", range(20))
def test_food_avoids_snake_and_walls(seed):
    rng = random.Random(seed)
    walls = generate_walls(START_SNAKE, 15, 20, rng)
    food = place_food(START_SNAKE, walls, 20, rng)
    assert food not in START_SNAKE
    assert food not in walls


def test_food_takes_last_free_cell():
    snake = [(0, 0), (1, 0)]
    walls = {(0, 1)}
    assert place_food(snake, walls, 2, random.Random(3)) == (1, 1)


def test_food_on_full_board_is_none():
    snake = [(0, 0), (1, 0)]
    walls = {(0, 1), (1, 1)}
    assert place_food(snake, walls, 2, random.Random(3)) is None
