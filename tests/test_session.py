from dataclasses import replace

import pygame
import pytest

from rage_pong.constants import TICK_EVENT, WINNING_SCORE
from rage_pong.data_models import Winner
from rage_pong.session import DEFEAT, PROMPT, VICTORY, GamePhase, GameSession

TICK = pygame.event.Event(TICK_EVENT)
SPACE = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)


@pytest.fixture
def session(engine):
    return GameSession(engine)


@pytest.fixture
def playing(session):
    session.handle(SPACE)
    return session


def test_starts_waiting_with_a_prompt(session):
    assert session.phase is GamePhase.AWAITING_START
    assert session.overlay == PROMPT


def test_ticks_are_ignored_before_start(session):
    state = session.state
    assert session.handle(TICK) is None
    assert session.handle(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w)) is None
    assert session.state is state


def test_space_starts_the_game(session):
    state = session.handle(SPACE)
    assert state is session.state
    assert session.phase is GamePhase.PLAYING
    assert session.overlay is None


def test_playing_steps_the_engine(playing):
    before = playing.state
    after = playing.handle(TICK)
    assert after is playing.state
    assert after.ball != before.ball


def test_unmapped_events_are_ignored_while_playing(playing):
    state = playing.state
    assert playing.handle(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_x)) is None
    assert playing.state is state


def test_space_does_not_restart_a_running_game(playing):
    playing.state = replace(playing.state, player_score=3)
    assert playing.handle(SPACE) is None
    assert playing.state.player_score == 3
    assert playing.phase is GamePhase.PLAYING


@pytest.mark.parametrize("scores,winner,overlay", [
    ({"player_score": WINNING_SCORE}, Winner.PLAYER, VICTORY),
    ({"ai_score": WINNING_SCORE}, Winner.CPU, DEFEAT),
])
def test_win_waits_for_restart(playing, scores, winner, overlay):
    playing.state = replace(playing.state, **scores)
    won = playing.handle(TICK)
    assert won.winner is winner
    assert playing.phase is GamePhase.AWAITING_RESTART
    assert playing.overlay == overlay

    # Waiting: the finished game is frozen
    assert playing.handle(TICK) is None
    assert playing.handle(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w)) is None
    assert playing.state is won


def test_restart_builds_a_fresh_game(playing):
    playing.state = replace(playing.state, player_score=WINNING_SCORE, ai_score=5)
    playing.handle(TICK)
    fresh = playing.handle(SPACE)
    assert (fresh.player_score, fresh.ai_score) == (0, 0)
    assert fresh.winner is Winner.NONE
    assert playing.phase is GamePhase.PLAYING
    assert playing.overlay is None
    # A second space is an ordinary key press again
    assert playing.handle(SPACE) is None


def test_feed_yields_a_state_per_action(session):
    w = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w)
    x = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_x)
    states = list(session.feed([TICK, SPACE, TICK, w, x, TICK]))
    # The leading tick is ignored while waiting, x has no action
    assert len(states) == 4
    assert states[-1] is session.state
    assert states[2].player_paddle.velocity < 0
    assert session.games_started == 1


def test_feed_stops_stepping_at_a_win(playing):
    playing.state = replace(playing.state, ai_score=WINNING_SCORE)
    states = list(playing.feed([TICK, TICK, TICK, SPACE, TICK]))
    # Win, ignored ticks, restart, one tick of the new game
    assert states[0].winner is Winner.CPU
    assert len(states) == 3
    assert (states[1].player_score, states[1].ai_score) == (0, 0)
    assert states[2] is playing.state
    assert playing.phase is GamePhase.PLAYING
    assert playing.games_started == 2
