"""
actions.py: The discrete intents a single reducer step can consume.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Move:
    """Set the paddle's vertical velocity (negative is upwards)."""
    velocity: float


@dataclass(frozen=True)
class GrowPaddle:
    amount: float


@dataclass(frozen=True)
class Teleport:
    """Jump the paddle to the ball's height."""


@dataclass(frozen=True)
class ShrinkOpponent:
    amount: float


@dataclass(frozen=True)
class DrainEnergy:
    """Spend one energy without any other effect."""


@dataclass(frozen=True)
class NoOp:
    """A plain tick: everything keeps moving at its current velocity."""


Action = Union[Move, GrowPaddle, Teleport, ShrinkOpponent, DrainEnergy, NoOp]

STOP = Move(0)
