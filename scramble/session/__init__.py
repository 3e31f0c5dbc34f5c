"""
Session Module - Manages ephemeral game sessions.

A session represents one player's run of games:
- Created when the player starts playing
- Holds the current GameSession
- "New game" keeps the session and its score
- Destroyed when the player leaves

Sessions are EPHEMERAL: nothing is persisted.
"""

from .game import GameSession, GameNotStartedError, StateListener
from .manager import SessionManager, Session

__all__ = [
    "GameSession",
    "GameNotStartedError",
    "StateListener",
    "SessionManager",
    "Session",
]
