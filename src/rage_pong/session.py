"""
session.py: The game's phases around the engine.

A session waits for the start key, plays until someone wins, then waits for
the start key again. Waiting is a phase, not a listener, so there is nothing
to unsubscribe: the first start signal moves the session on and later ones
are plain (ignored) key presses.
"""

import itertools
from enum import Enum
from typing import Iterable, Iterator, Optional

import pygame

from .data_models import GameState, Winner
from .engine import GameEngine
from .input_mapper import action_stream, is_start_signal


class GamePhase(Enum):
    AWAITING_START = "awaiting_start"
    PLAYING = "playing"
    AWAITING_RESTART = "awaiting_restart"


# Overlay label ids shown by the render sink
PROMPT = "startGamePrompt"
VICTORY = "victory"
DEFEAT = "defeat"


class GameSession:
    """Owns the single current GameState and the phase it is in."""

    def __init__(self, engine: Optional[GameEngine] = None):
        self.engine = engine or GameEngine()
        self.phase = GamePhase.AWAITING_START
        self.state: GameState = self.engine.initial_state()
        self.overlay: Optional[str] = PROMPT
        self.games_started = 0

    @property
    def waiting(self) -> bool:
        return self.phase is not GamePhase.PLAYING

    def handle(self, event: pygame.event.Event) -> Optional[GameState]:
        """Processes one event; returns the new state if the event changed it."""
        states = list(self.feed([event]))
        return states[-1] if states else None

    def feed(self, events: Iterable[pygame.event.Event]) -> Iterator[GameState]:
        """
        Processes events in arrival order, yielding every state they produce.
        While playing, the engine folds the action stream until someone wins;
        events after the win are handled by the waiting phase.
        """
        events = iter(events)
        for event in events:
            if self.waiting:
                if is_start_signal(event):
                    yield self._start()
                continue

            for state in self.engine.run(action_stream(itertools.chain([event], events)), self.state):
                self.state = state
                if state.winner is not Winner.NONE:
                    self._finish(state.winner)
                yield state
                if self.waiting:
                    break

    def _start(self) -> GameState:
        self.state = self.engine.initial_state()
        self.phase = GamePhase.PLAYING
        self.overlay = None
        self.games_started += 1
        return self.state

    def _finish(self, winner: Winner):
        self.phase = GamePhase.AWAITING_RESTART
        self.overlay = VICTORY if winner is Winner.PLAYER else DEFEAT
