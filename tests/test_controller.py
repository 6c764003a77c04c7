import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from wallsnake.config import STATE_OVER, STATE_RUNNING
from wallsnake.controller import GameController
from wallsnake.highscore import MemoryHighScoreStore
from wallsnake.model import Direction, GameModel


@pytest.fixture
def controller():
    model = GameModel(grid_size=20, highscores=MemoryHighScoreStore(), rng=random.Random(6))
    ctrl = GameController(model)
    ctrl._start()
    model.walls = frozenset()
    model.food = (0, 0)
    yield ctrl
    pygame.quit()


def tap(ctrl, pos):
    ctrl._press_pos = pos
    ctrl._handle_release(pos)


def test_driver_stops_on_game_over(controller):
    model = controller.model
    model.walls = frozenset({(10, 13)})
    controller._run_due_ticks(0.35)
    assert model.state == STATE_OVER
    assert not controller.scheduler.running
    assert model.ticks == 2
    assert model.snake.head == (10, 14)

    controller._run_due_ticks(1.0)
    assert model.ticks == 2
    assert model.snake.head == (10, 14)


def test_tap_on_button_restarts_after_game_over(controller):
    model = controller.model
    model.walls = frozenset({(10, 14)})
    controller._run_due_ticks(0.15)
    assert model.state == STATE_OVER

    tap(controller, controller.view.button_rect.center)
    assert model.state == STATE_RUNNING
    assert controller.scheduler.running
    assert list(model.snake) == [(10, 15), (10, 16), (10, 17)]


def test_tap_elsewhere_does_nothing(controller):
    model = controller.model
    model.walls = frozenset({(10, 14)})
    controller._run_due_ticks(0.15)

    tap(controller, (5, 300))
    assert model.state == STATE_OVER


def test_drag_turns_the_snake(controller):
    controller._press_pos = (100, 200)
    controller._handle_release((160, 210))
    controller._run_due_ticks(0.15)
    assert controller.model.snake.head == (11, 15)


def test_release_without_press_is_ignored(controller):
    controller._handle_release((160, 210))
    controller._run_due_ticks(0.15)
    assert controller.model.direction == Direction.UP


def test_frame_renders_particles_and_overlay(controller):
    model = controller.model
    model.food = (10, 14)
    controller._run_due_ticks(0.15)
    model.walls = frozenset({(10, 13)})
    controller._run_due_ticks(0.15)
    assert model.state == STATE_OVER
    assert len(model.particles) == 10

    model.particles.update()
    controller.view.render(model.snapshot())
    assert controller.screen.get_at(controller.view.button_rect.center) is not None
