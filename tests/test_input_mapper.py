import pygame

from rage_pong.actions import GrowPaddle, Move, NoOp, ShrinkOpponent, Teleport
from rage_pong.constants import PADDLE_GROWTH, PADDLE_SHRINK, PADDLE_SPEED, TICK_EVENT
from rage_pong.input_mapper import action_stream, is_start_signal, map_event


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


def test_movement_keys():
    assert map_event(key_down(pygame.K_w)) == Move(-PADDLE_SPEED)
    assert map_event(key_down(pygame.K_s)) == Move(PADDLE_SPEED)


def test_ability_keys():
    assert map_event(key_down(pygame.K_e)) == GrowPaddle(PADDLE_GROWTH)
    assert map_event(key_down(pygame.K_r)) == Teleport()
    assert map_event(key_down(pygame.K_q)) == ShrinkOpponent(PADDLE_SHRINK)


def test_any_key_release_stops():
    assert map_event(key_up(pygame.K_w)) == Move(0)
    assert map_event(key_up(pygame.K_x)) == Move(0)


def test_tick_is_a_noop():
    assert map_event(pygame.event.Event(TICK_EVENT)) == NoOp()


def test_unbound_events_are_dropped():
    assert map_event(key_down(pygame.K_x)) is None
    assert map_event(key_down(pygame.K_SPACE)) is None
    assert map_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))) is None


def test_stream_keeps_arrival_order():
    events = [
        pygame.event.Event(TICK_EVENT),
        key_down(pygame.K_w),
        key_down(pygame.K_x),
        pygame.event.Event(TICK_EVENT),
        key_up(pygame.K_w),
        key_down(pygame.K_e),
    ]
    assert list(action_stream(events)) == [
        NoOp(), Move(-PADDLE_SPEED), NoOp(), Move(0), GrowPaddle(PADDLE_GROWTH),
    ]


def test_start_signal():
    assert is_start_signal(key_down(pygame.K_SPACE))
    assert not is_start_signal(key_up(pygame.K_SPACE))
    assert not is_start_signal(key_down(pygame.K_w))
