"""
engine.py: The authoritative game simulation.
Folds each incoming action onto the previous GameState to produce the next one.
"""

import itertools
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional

from .actions import STOP, Action, DrainEnergy, GrowPaddle, ShrinkOpponent, Teleport
from .ai_controller import follow_ball
from .constants import WINNING_SCORE
from .data_models import (
    GameState, PaddleId, ScoreMarker, Winner,
    default_ball, default_paddle, default_state
)
from .physics_core import PhysicsCore

TOWARD_PLAYER = -1
TOWARD_CPU = 1
STILL = 0


@dataclass
class GameEngine(PhysicsCore):
    """
    The state reducer. Inherits paddle and ball physics from PhysicsCore.
    `step` never mutates its input; every call returns a brand-new GameState.
    """

    def initial_state(self) -> GameState:
        return default_state(self.rng)

    def step(self, state: GameState, action: Action) -> GameState:
        """
        One transition. Exactly one branch runs, checked in priority order:
        abilities, shrink ray, goals, win check, ordinary tick.
        """
        # A finished game stays finished until a restart builds a new state
        if state.winner is not Winner.NONE:
            return state

        energy = state.player_energy

        match action:
            # 1. Grow / teleport
            case GrowPaddle() | Teleport() if energy > 0:
                return self._tick(state, action)
            # 2. Shrink ray: drains the player and shrinks the CPU in one step
            case ShrinkOpponent() if energy > 0:
                return replace(
                    state,
                    player_paddle=self.apply_action(state.player_paddle, DrainEnergy(), state.ball),
                    ai_paddle=self.apply_action(state.ai_paddle, action, state.ball),
                    ball=self.move_ball(state.ball, state.player_paddle, state.ai_paddle),
                )
            case ShrinkOpponent():
                return self._tick(state, STOP)

        # 3. / 4. Goals
        if state.ball.marker is ScoreMarker.PLAYER_SCORED:
            return self._after_goal(state, TOWARD_CPU, player_score=state.player_score + 1)
        if state.ball.marker is ScoreMarker.CPU_SCORED:
            return self._after_goal(state, TOWARD_PLAYER, ai_score=state.ai_score + 1,
                                    player_energy=energy + 1)

        # 5. Win check
        if state.player_score >= WINNING_SCORE:
            return self._game_over(state, Winner.PLAYER)
        if state.ai_score >= WINNING_SCORE:
            return self._game_over(state, Winner.CPU)

        # 6. Ordinary tick
        return self._tick(state, action)

    def run(self, actions: Iterable[Action], state: Optional[GameState] = None) -> Iterator[GameState]:
        """Left fold over an action stream, yielding every state after the seed."""
        if state is None:
            state = self.initial_state()
        states = itertools.accumulate(actions, self.step, initial=state)
        next(states)
        return states

    # -------- Branch helpers --------

    def _tick(self, state: GameState, action: Action) -> GameState:
        """Player acts, the CPU follows the ball, the ball moves against last tick's paddles."""
        ai_move = follow_ball(state.ai_paddle, state.ball)
        return replace(
            state,
            player_paddle=self.apply_action(state.player_paddle, action, state.ball),
            ai_paddle=self.apply_action(state.ai_paddle, ai_move, state.ball),
            ball=self.move_ball(state.ball, state.player_paddle, state.ai_paddle),
        )

    def _reset_paddles(self, state: GameState, player_energy: int) -> dict:
        return {
            "player_paddle": default_paddle(PaddleId.PLAYER, energy=player_energy),
            "ai_paddle": default_paddle(PaddleId.AI, energy=state.ai_paddle.energy),
        }

    def _after_goal(self, state: GameState, direction: int, player_energy: Optional[int] = None,
                    **scores) -> GameState:
        if player_energy is None:
            player_energy = state.player_energy
        return replace(
            state,
            ball=default_ball(self.rng, direction),
            **self._reset_paddles(state, player_energy),
            **scores,
        )

    def _game_over(self, state: GameState, winner: Winner) -> GameState:
        return replace(
            state,
            ball=default_ball(self.rng, STILL),
            winner=winner,
            **self._reset_paddles(state, state.player_energy),
        )
