import random

import pygame
import pytest

from glplayground.gamedata import Input, State
from glplayground.geometry import Vec2
from glplayground.snake import BodyPiece
from glplayground.snake_app import SnakeGame, draw


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def game(clock):
    g = SnakeGame(600, 600, rng=random.Random(7), clock=clock)
    g.fruit.translation = Vec2(0.5, 0.5)
    return g


def test_new_game_is_playing_heading_up(game):
    assert game.game_data.state is State.PLAYING
    assert game.game_data.inputs == {Input.UP}
    assert game.body.pieces == []


def test_update_waits_for_step_interval(game, clock):
    clock.now = 0.05
    assert game.update() is False
    assert game.snake.y == 0


def test_update_moves_snake_after_interval(game, clock):
    clock.now = 0.2
    assert game.update() is True
    assert game.snake.y == 1
    assert game.snake.translation.y == pytest.approx(game.snake.scale)


def test_reverse_direction_is_ignored(game):
    game.handle_key("down")
    assert game.game_data.inputs == {Input.UP}


def test_turn_replaces_direction(game):
    game.handle_key("a")
    assert game.game_data.inputs == {Input.LEFT}
    game.handle_key("right")
    assert game.game_data.inputs == {Input.LEFT}
    game.handle_key("s")
    assert game.game_data.inputs == {Input.DOWN}


def test_unknown_key_changes_nothing(game):
    game.handle_key("q")
    assert game.game_data.inputs == {Input.UP}


def test_keys_ignored_after_game_over(game):
    game.game_data.state = State.GAME_OVER
    game.game_data.clear()
    game.handle_key("left")
    assert game.game_data.inputs == set()


def test_eating_fruit_grows_body(game):
    game.fruit.translation = game.snake.translation
    game.check_collisions()
    assert game.body.length == 1
    assert len(game.body.pieces) == 1
    assert game.body.pieces[0].translation == game.snake.translation


def test_biting_body_ends_game(game, clock):
    game.body.pieces = [BodyPiece(x=5, y=5), BodyPiece(x=game.snake.x, y=game.snake.y)]
    game.body.length = 2
    game.check_collisions()
    assert game.game_data.state is State.GAME_OVER
    assert game.game_data.inputs == set()


def test_first_piece_on_head_does_not_count(game):
    game.body.pieces = [BodyPiece(x=game.snake.x, y=game.snake.y)]
    game.body.length = 1
    game.check_collisions()
    assert game.game_data.state is State.PLAYING


def test_game_over_waits_before_restart(game, clock):
    game.body.pieces = [BodyPiece(x=5, y=5), BodyPiece(x=0, y=0)]
    game.body.length = 2
    game.check_collisions()
    clock.now = 1.0
    assert game.update() is True
    assert game.game_data.state is State.GAME_OVER


def test_game_restarts_after_delay(game, clock):
    game.body.pieces = [BodyPiece(x=5, y=5), BodyPiece(x=0, y=0)]
    game.body.length = 2
    game.check_collisions()
    clock.now = 6.0
    assert game.update() is False
    assert game.game_data.state is State.PLAYING
    assert game.game_data.inputs == {Input.UP}
    assert game.body.pieces == []
    assert game.body.length == 0
    assert game.snake.translation == Vec2()


def test_resize_records_viewport(game):
    game.resize(800, 400)
    assert (game.width, game.height) == (800, 400)


def test_draw_paints_snake_head(game):
    surface = pygame.Surface((600, 600))
    draw(game, surface)
    scale = game.snake.scale
    cx = round(300 + scale * 300 / 2)
    cy = round(300 - scale * 300 / 2)
    assert tuple(surface.get_at((cx, cy)))[:3] == (0, 255, 0)
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)