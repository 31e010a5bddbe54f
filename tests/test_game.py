import random

import pytest

from brickpong.config import Configuration
from brickpong.game import Game
from brickpong.sound import SoundPlayer


class _FakeSound:
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def play(self):
        self.log.append(self.name)


@pytest.fixture
def played():
    return []


@pytest.fixture
def game(played):
    sounds = SoundPlayer(loader=lambda name: _FakeSound(name, played))
    return Game(Configuration(), sounds, random.Random(1))


NO_MOUSE = (-100.0, -100.0)


def idle(game):
    game.step(False, False, False, NO_MOUSE)


def test_initial_state(game):
    cfg = game.config
    assert game.lives == 3
    assert game.score == 0
    assert game.message() == "Vies : 3 Pointage : 0"
    assert not game.is_over()
    assert len(game.bricks) == cfg.brick_rows * cfg.brick_lines


def test_bricks_do_not_overlap_ball_or_paddle(game):
    for brick in game.bricks:
        assert not brick.hit_box().intersects(game.ball.hit_box())
        assert not brick.hit_box().intersects(game.paddle.hit_box())


def test_first_brick_sits_after_one_spacing(game):
    first = game.bricks[0]
    assert first.x == pytest.approx(game.config.spacing)
    assert first.y == pytest.approx(90.0)


def test_idle_step_moves_ball(game):
    start = (game.ball.x, game.ball.y)
    idle(game)
    assert game.ball.x == pytest.approx(start[0] + game.ball.vx)
    assert game.ball.y == pytest.approx(start[1] + game.ball.vy)


def test_falling_below_floor_costs_a_life(game, played):
    game.ball.y = game.config.window_height + 1
    idle(game)
    assert game.lives == 2
    assert game.ball.y == pytest.approx(game.ball.start_y + game.ball.vy)
    assert played == ["rate.ogg"]


def test_losing_all_lives_ends_game(game):
    for _ in range(3):
        game.ball.y = game.config.window_height + 1
        idle(game)
    assert game.is_over()
    assert game.message() == "Game Over"


def test_ceiling_bounces_ball_down(game, played):
    game.ball.y = -1
    game.ball.vy = -1.2
    idle(game)
    assert game.ball.vy == pytest.approx(1.2)
    assert played == ["rebond.ogg"]


def test_wall_reverses_horizontal_speed(game, played):
    game.ball.x = -1
    game.ball.vx = -1.2
    idle(game)
    assert game.ball.vx == pytest.approx(1.2)
    assert played == ["rebond.ogg"]


def test_right_wall_reverses_horizontal_speed(game):
    game.ball.x = game.config.window_width - 5
    idle(game)
    assert game.ball.vx < 0


def test_paddle_hit_scores_and_bounces(game, played):
    game.ball.x = game.paddle.x + 5
    game.ball.y = game.paddle.y - 5
    vy = game.ball.vy
    idle(game)
    assert game.score == 1
    assert game.ball.vy == pytest.approx(-vy)
    assert played == ["reussi.ogg"]
    assert game.message() == f"Vies : 3 Pointage : {game.score}"


def test_brick_hit_removes_brick(game, played):
    target = game.bricks[0]
    count = len(game.bricks)
    game.ball.x = target.x + 1
    game.ball.y = target.y + 1
    idle(game)
    assert target not in game.bricks
    assert len(game.bricks) == count - 1
    assert game.score == 1
    assert played == ["reussi.ogg"]


def test_keys_move_paddle(game):
    x = game.paddle.x
    game.step(True, False, False, NO_MOUSE)
    assert game.paddle.x == pytest.approx(x - game.paddle.speed)
    game.step(False, True, False, NO_MOUSE)
    assert game.paddle.x == pytest.approx(x)


def test_left_key_wins_over_right(game):
    x = game.paddle.x
    game.step(True, True, False, NO_MOUSE)
    assert game.paddle.x == pytest.approx(x - game.paddle.speed)


def test_mouse_grabs_and_drags_paddle(game):
    inside = (game.paddle.x + 1, game.paddle.y + 1)
    game.step(False, False, True, inside)
    assert game.holding_paddle
    game.step(False, False, True, (100.0, 10.0))
    assert game.paddle.x == 100.0
    game.step(False, False, False, NO_MOUSE)
    assert not game.holding_paddle


def test_mouse_outside_paddle_does_not_grab(game):
    x = game.paddle.x
    game.step(False, False, True, (0.0, 0.0))
    assert not game.holding_paddle
    assert game.paddle.x == x


def test_toys_include_paddle_ball_and_bricks(game):
    toys = list(game.toys())
    assert toys[0] is game.paddle
    assert toys[1] is game.ball
    assert toys[2:] == game.bricks