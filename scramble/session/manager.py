"""
Session Manager - Creates and tracks game sessions.

Sessions are EPHEMERAL:
- Held in memory only, no database
- One GameSession per session, owned exclusively by it
- Removed when the player ends the game or the session goes stale

The dictionary and word source are shared by all sessions. Both are
read-only after startup.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING
import logging
import time
import uuid

from .game import GameSession

if TYPE_CHECKING:
    from ..dictionary import Dictionary
    from ..words import WordSource

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    An ephemeral game session.

    The session is destroyed when the game ends.
    State is NOT persisted.
    """
    session_id: str
    game: GameSession
    created_at: float
    player_name: str = "Player"
    last_activity: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)

    def touch(self):
        """Record activity on the session."""
        self.last_activity = time.time()


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions and start their first game
    - Track active sessions
    - Clean up ended or stale sessions
    """

    def __init__(
        self,
        dictionary: Dictionary,
        word_source: WordSource,
        language: str = "en",
    ):
        self.dictionary = dictionary
        self.word_source = word_source
        self.language = language
        self._sessions: dict[str, Session] = {}

    def create_session(self, player_name: str = "Player") -> Session:
        """
        Create a session with a started game.

        Raises:
            WordPoolError: if no root word can be drawn; nothing is registered
        """
        game = GameSession(
            dictionary=self.dictionary,
            word_source=self.word_source,
            language=self.language,
        )
        game.start_game()

        now = time.time()
        session = Session(
            session_id=str(uuid.uuid4()),
            game=game,
            created_at=now,
            player_name=player_name,
            last_activity=now,
        )
        self._sessions[session.session_id] = session
        logger.info("Session %s created for %s", session.session_id, player_name)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and drop its state.

        Returns True if the session existed.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        logger.info("Session %s ended (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return list(self._sessions.keys())

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        End sessions idle for longer than max_age_seconds.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        stale = [
            session_id for session_id, session in self._sessions.items()
            if current_time - session.last_activity > max_age_seconds
        ]
        for session_id in stale:
            self.end_session(session_id, reason="stale")
        return len(stale)
