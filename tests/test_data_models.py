import dataclasses
import random

import pytest

from rage_pong.constants import AI_PADDLE_X, CANVAS_HEIGHT, CANVAS_WIDTH, PLAYER_PADDLE_X
from rage_pong.data_models import (
    Ball, PaddleId, ScoreMarker, TextLabel, Winner, default_ball, default_paddle, default_state
)


def test_default_paddles_are_centred():
    player = default_paddle(PaddleId.PLAYER)
    ai = default_paddle(PaddleId.AI, energy=9)
    assert (player.x, player.y, player.velocity) == (PLAYER_PADDLE_X, 255, 0)
    assert (ai.x, ai.energy) == (AI_PADDLE_X, 9)
    assert player.centre == 300


@pytest.mark.parametrize("direction", [-1, 1])
def test_default_ball_heads_the_right_way(fixed_rng, direction):
    ball = default_ball(fixed_rng, direction)
    assert (ball.x, ball.y) == (CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2)
    assert ball.vx == 5 * direction
    assert ball.marker is ScoreMarker.NONE


def test_default_ball_vertical_speed_range():
    rng = random.Random(7)
    for _ in range(200):
        assert -3 <= default_ball(rng, 1).vy <= 4


def test_still_ball(fixed_rng):
    ball = default_ball(fixed_rng, 0)
    assert (ball.vx, ball.vy) == (0, 0)


def test_default_state(fixed_rng):
    state = default_state(fixed_rng)
    assert state.winner is Winner.NONE
    assert state.ball.vx > 0
    assert state.player_energy == state.player_paddle.energy == 4


def test_values_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Ball(0, 0).x = 5


def test_label_content():
    assert TextLabel("prompt", 0, 0, 20, "Press space").content == "Press space"
    assert TextLabel("score", 0, 0, 20, value=7).content == "7"
    assert TextLabel("rage", 0, 0, 20, "Rage: ", value=0).content == "Rage: 0"
