"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

import random
from dataclasses import dataclass, field, replace

from .actions import Action, DrainEnergy, GrowPaddle, Move, ShrinkOpponent, Teleport
from .constants import (
    BALL_BASE_Y_SPEED, BOTTOM_BOUND, CANVAS_HEIGHT, CANVAS_WIDTH,
    MIN_PADDLE_HEIGHT, SIDE_BOUND, TOP_BOUND
)
from .data_models import Ball, Paddle, ScoreMarker


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x


@dataclass
class PhysicsCore:
    """
    Pure paddle and ball physics. The only non-determinism is the bounce
    angle, drawn from `rng`, so seeding it makes a whole game repeatable.
    """

    rng: random.Random = field(default_factory=random.Random)

    TOP = TOP_BOUND
    FLOOR = CANVAS_HEIGHT - BOTTOM_BOUND   # Top edge of the bottom wall
    CENTRE_X = CANVAS_WIDTH / 2

    # -------- Paddles --------

    def move_paddle(self, paddle: Paddle, velocity: float) -> Paddle:
        """
        Moves a paddle one tick at `velocity`.
        A paddle about to cross a wall while moving into it stops flush
        against it; one already past a wall and still pushing out stays put.
        """
        top = self.TOP
        bottom = self.FLOOR - paddle.height
        y = paddle.y
        new_y = y + velocity

        can_move = (
            (top < y < bottom)
            or (y <= top and velocity >= 0)
            or (y >= bottom and velocity <= 0)
        )
        if not can_move:
            return replace(paddle, velocity=0)
        if new_y < top and velocity < 0:
            return replace(paddle, y=top, velocity=0)
        if new_y > bottom and velocity > 0:
            return replace(paddle, y=bottom, velocity=0)
        return replace(paddle, y=new_y, velocity=velocity)

    def apply_action(self, paddle: Paddle, action: Action, ball: Ball) -> Paddle:
        """Returns the paddle after `action`; abilities without energy fall back to a plain tick."""
        match action:
            case Move(velocity=velocity):
                return self.move_paddle(paddle, velocity)
            case GrowPaddle(amount=amount) if paddle.energy > 0:
                return self._fit(replace(paddle, height=paddle.height + amount,
                                         energy=paddle.energy - 1))
            case Teleport() if paddle.energy > 0:
                return self._fit(replace(paddle, y=ball.y, velocity=ball.vy,
                                         energy=paddle.energy - 1))
            case DrainEnergy() if paddle.energy > 0:
                return replace(paddle, energy=paddle.energy - 1)
            case ShrinkOpponent(amount=amount):
                return self._fit(replace(paddle, height=paddle.height - amount))
            case _:
                return self.move_paddle(paddle, paddle.velocity)

    def _fit(self, paddle: Paddle) -> Paddle:
        """Keeps a resized or teleported paddle inside the playfield."""
        height = clamp(paddle.height, MIN_PADDLE_HEIGHT, self.FLOOR - self.TOP)
        y = clamp(paddle.y, self.TOP, self.FLOOR - height)
        if y == paddle.y and height == paddle.height:
            return paddle
        velocity = paddle.velocity if y == paddle.y else 0
        return replace(paddle, y=y, height=height, velocity=velocity)

    # -------- Ball --------

    def deflection_speed(self, paddle: Paddle, impact_y: float) -> float:
        """Vertical speed after a paddle hit: a random base plus a bonus for hitting off-centre."""
        distance = abs(impact_y - paddle.centre)
        return BALL_BASE_Y_SPEED * self.rng.random() + distance / 8

    def move_ball(self, ball: Ball, player: Paddle, ai: Paddle) -> Ball:
        """
        Advances the ball one tick. Exactly one rule applies, checked in order:
        scoring walls, top/bottom walls, player paddle, AI paddle, free flight.
        The returned ball only carries a score marker if a scoring wall was hit.
        """
        x, y, vx, vy, r = ball.x, ball.y, ball.vx, ball.vy, ball.radius
        left, right = x - r, x + r
        top, bottom = y - r, y + r

        # 1. Scoring walls
        if left <= SIDE_BOUND:
            return replace(ball, vx=0, vy=0, marker=ScoreMarker.CPU_SCORED)
        if right >= CANVAS_WIDTH - SIDE_BOUND:
            return replace(ball, vx=0, vy=0, marker=ScoreMarker.PLAYER_SCORED)

        # 2. Roof / floor: back off one step instead of solving the exact impact time
        if (top <= self.TOP and vy < 0) or (bottom >= self.FLOOR and vy > 0):
            return replace(ball, x=x + vx, y=y - vy, vy=-vy, marker=ScoreMarker.NONE)

        # 3. Paddles
        if (player.x <= left <= player.x + player.width
                and self._spans(player, top, bottom)
                and x <= self.CENTRE_X and vx < 0):
            return self._bounce(ball, player)
        if (ai.x <= right <= ai.x + ai.width
                and self._spans(ai, top, bottom)
                and x >= self.CENTRE_X and vx > 0):
            return self._bounce(ball, ai)

        # 4. No collision
        return replace(ball, x=x + vx, y=y + vy, marker=ScoreMarker.NONE)

    @staticmethod
    def _spans(paddle: Paddle, top: float, bottom: float) -> bool:
        """True when the ball's vertical extent overlaps the paddle's, even if the paddle is shorter than the ball."""
        return paddle.y <= bottom and top <= paddle.bottom

    def _bounce(self, ball: Ball, paddle: Paddle) -> Ball:
        speed = self.deflection_speed(paddle, ball.y)
        return replace(
            ball,
            x=ball.x - ball.vx,
            y=ball.y + speed,
            vx=-ball.vx,
            vy=speed,
            marker=ScoreMarker.NONE,
        )
