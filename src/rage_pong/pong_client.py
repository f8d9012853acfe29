#!/usr/bin/env python3
"""
pong_client.py

Pygame window, timer and event loop around the game session.
Uses the modular architecture: constants, engine, session, render_sink.
"""

import random
import time
from typing import List, Optional

import pygame

from .constants import CANVAS_HEIGHT, CANVAS_WIDTH, QUIT_KEY, RENDER_FPS, TICK_EVENT, TICK_MS
from .data_models import GameState, Winner
from .engine import GameEngine
from .render_sink import RenderContext, RenderSink
from .session import GameSession


def is_quit(event: pygame.event.Event) -> bool:
    return event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == QUIT_KEY)


class PongClient:
    def __init__(self, seed: Optional[int] = None):
        pygame.init()
        self.screen = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT))
        pygame.display.set_caption("Rage Pong")

        # --- Game Logic ---
        self.session = GameSession(GameEngine(rng=random.Random(seed)))

        # --- Rendering ---
        self.sink = RenderSink(RenderContext.create(self.screen))
        self.clock = pygame.time.Clock()
        self.last_score = (0, 0)
        self.games_reported = 0

    def run(self):
        """The main client execution loop."""
        pygame.time.set_timer(TICK_EVENT, TICK_MS)
        self._render()
        print("Press space to start. W/S move, E grow, R teleport, Q shrink ray, Esc quits.")

        running = True
        while running:
            self.clock.tick(RENDER_FPS)
            # Ticks and key presses arrive on the same queue, in order
            running = self.process(pygame.event.get())

        pygame.time.set_timer(TICK_EVENT, 0)
        pygame.quit()

    def process(self, events: List[pygame.event.Event]) -> bool:
        """Feeds a batch of events to the session, rendering every state it produces. False means quit."""
        quit_at = next((i for i, event in enumerate(events) if is_quit(event)), None)

        for state in self.session.feed(events[:quit_at]):
            self._report(state)
            self._render()
        return quit_at is None

    def _render(self):
        if self.sink.render(self.session.state, self.session.overlay):
            pygame.display.flip()

    def _report(self, state: GameState):
        """Prints lifecycle events: starts, goals, and the end of a game."""
        if self.session.games_started != self.games_reported:
            print("Game started.")
            self.games_reported = self.session.games_started
            self.last_score = (0, 0)
            return

        score = (state.player_score, state.ai_score)
        if score != self.last_score:
            print(f"Goal! Player {score[0]} - {score[1]} CPU (rage: {state.player_energy})")
            self.last_score = score

        if state.winner is Winner.PLAYER:
            print("You win! Press space to play again.")
        elif state.winner is Winner.CPU:
            print("You lose. Press space to play again.")


def main():
    try:
        client = PongClient()
    except pygame.error as e:
        print(f"Could not open the game window: {e}")
        pygame.quit()
        return

    started = time.time()
    try:
        client.run()
    except KeyboardInterrupt:
        pygame.quit()
    print(f"Client stopped after {time.time() - started:0.0f}s.")


if __name__ == "__main__":
    main()
