"""
data_models.py: Immutable data structures for the game state.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import (
    AI_PADDLE_X, BALL_BASE_X_SPEED, BALL_BASE_Y_SPEED, BALL_RADIUS,
    CANVAS_HEIGHT, CANVAS_WIDTH, HALFWAY, PADDLE_HEIGHT, PADDLE_WIDTH,
    PLAYER_PADDLE_X, STARTING_ENERGY, UI_COLOUR
)


class PaddleId(str, Enum):
    PLAYER = "PaddlePlayer"
    AI = "PaddleAI"


class ScoreMarker(Enum):
    """Set on the ball by the physics step that touched a scoring wall."""
    NONE = "none"
    PLAYER_SCORED = "player"
    CPU_SCORED = "cpu"


class Winner(Enum):
    NONE = "none"
    PLAYER = "player"
    CPU = "cpu"


@dataclass(frozen=True)
class Paddle:
    """A rectangular paddle. `y` is the top edge; only vertical motion exists."""
    id: PaddleId
    x: float
    y: float
    velocity: float = 0.0
    height: float = PADDLE_HEIGHT
    width: float = PADDLE_WIDTH
    energy: int = STARTING_ENERGY

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def centre(self) -> float:
        return self.y + self.height / 2


@dataclass(frozen=True)
class Ball:
    """A circular ball. `x`/`y` is the centre."""
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    radius: float = BALL_RADIUS
    marker: ScoreMarker = ScoreMarker.NONE


@dataclass(frozen=True)
class TextLabel:
    """
    A piece of text the render sink draws.
    `text` is printed as is, followed by `value` when the label shows a number.
    """
    id: str
    x: float
    y: float
    size: int
    text: str = ""
    colour: tuple = UI_COLOUR
    value: Optional[int] = None

    @property
    def content(self) -> str:
        if self.value is None:
            return self.text
        return f"{self.text}{self.value}"


@dataclass(frozen=True)
class GameState:
    """Everything needed to draw one tick of the game."""
    player_paddle: Paddle
    ai_paddle: Paddle
    ball: Ball
    player_score: int = 0
    ai_score: int = 0
    winner: Winner = Winner.NONE

    @property
    def player_energy(self) -> int:
        """The energy shown on the rage display."""
        return self.player_paddle.energy


# -------- Defaults --------

PADDLE_X = {PaddleId.PLAYER: PLAYER_PADDLE_X, PaddleId.AI: AI_PADDLE_X}


def default_paddle(paddle_id: PaddleId, energy: int = STARTING_ENERGY) -> Paddle:
    """A resting, default-sized paddle centred in the playfield."""
    return Paddle(
        id=paddle_id,
        x=PADDLE_X[paddle_id],
        y=HALFWAY - PADDLE_HEIGHT / 2,
        energy=energy,
    )


def default_ball(rng: random.Random, direction: int) -> Ball:
    """
    A ball at the centre of the canvas.
    direction: -1 toward the player, 1 toward the CPU, 0 for a still ball.
    """
    if rng.random() > 0.5:
        vy = round(BALL_BASE_Y_SPEED * rng.random() / 2)
    else:
        vy = round(-BALL_BASE_Y_SPEED * rng.random() / 3)
    return Ball(
        x=CANVAS_WIDTH / 2,
        y=CANVAS_HEIGHT / 2,
        vx=direction * BALL_BASE_X_SPEED,
        vy=vy if direction else 0,
    )


def default_state(rng: random.Random) -> GameState:
    """The state a new game starts from: ball heading toward the CPU."""
    return GameState(
        player_paddle=default_paddle(PaddleId.PLAYER),
        ai_paddle=default_paddle(PaddleId.AI),
        ball=default_ball(rng, 1),
    )
