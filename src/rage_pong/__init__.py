"""Rage Pong: a paddle-and-ball game against a simple AI, with rage-powered abilities."""

from .engine import GameEngine
from .session import GameSession, GamePhase

__all__ = ['GameEngine', 'GameSession', 'GamePhase']
