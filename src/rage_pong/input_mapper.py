"""
input_mapper.py: Turns raw pygame events into Actions.

Ticks come from a pygame timer and share the event queue with the keyboard,
so the queue's delivery order is already the single ordered stream the
engine folds over. Nothing here batches or reorders events.
"""

from typing import Iterable, Iterator, Optional

import pygame

from .actions import STOP, Action, GrowPaddle, Move, NoOp, ShrinkOpponent, Teleport
from .constants import (
    DOWN_KEY, GROW_KEY, PADDLE_GROWTH, PADDLE_SHRINK, PADDLE_SPEED,
    SHRINK_KEY, START_KEY, TELEPORT_KEY, TICK_EVENT, UP_KEY
)

# Key-down bindings. Holding a key is emulated by moving until any key-up,
# since key repeat makes the paddle stutter.
KEYDOWN_ACTIONS = {
    UP_KEY: Move(-PADDLE_SPEED),
    DOWN_KEY: Move(PADDLE_SPEED),
    GROW_KEY: GrowPaddle(PADDLE_GROWTH),
    TELEPORT_KEY: Teleport(),
    SHRINK_KEY: ShrinkOpponent(PADDLE_SHRINK),
}


def map_event(event: pygame.event.Event) -> Optional[Action]:
    """Returns the Action for one event, or None if the game ignores it."""
    if event.type == TICK_EVENT:
        return NoOp()
    if event.type == pygame.KEYDOWN:
        return KEYDOWN_ACTIONS.get(event.key)
    if event.type == pygame.KEYUP:
        return STOP
    return None


def action_stream(events: Iterable[pygame.event.Event]) -> Iterator[Action]:
    """Maps events to actions in arrival order, dropping the ones with no action."""
    for event in events:
        action = map_event(event)
        if action is not None:
            yield action


def is_start_signal(event: pygame.event.Event) -> bool:
    return event.type == pygame.KEYDOWN and event.key == START_KEY
