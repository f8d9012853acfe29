"""
ai_controller.py: The CPU opponent. It simply chases the ball's height.
"""

from .actions import Move
from .constants import CPU_SPEED_BONUS, PADDLE_SPEED
from .data_models import Ball, Paddle


def follow_ball(paddle: Paddle, ball: Ball, speed: float = PADDLE_SPEED + CPU_SPEED_BONUS) -> Move:
    """Returns a Move steering the paddle's centre toward the ball (no prediction, no memory)."""
    if paddle.centre < ball.y:
        return Move(speed)
    if paddle.centre > ball.y:
        return Move(-speed)
    return Move(0)
