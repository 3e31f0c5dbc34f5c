"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine calls
2. Manages sessions
3. Formats engine results for the client

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .. import __version__
from .schemas import (
    # Requests
    CreateSessionRequest,
    SubmitWordRequest,
    NewGameRequest,
    # Responses
    SessionResponse,
    SubmitWordResponse,
    ErrorResponse,
    HealthResponse,
    # Shared
    GameStateInfo,
    UsedWordInfo,
    # Enums
    ErrorCode,
    SubmissionOutcome,
    RejectionReason,
)
from ..config import ScrambleConfig
from ..dictionary import create_dictionary
from ..engine_core.state import GameState
from ..engine_core.action import SubmitResult
from ..session import SessionManager, Session
from ..words import FileWordSource


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService.from_config(ScrambleConfig.from_env())

        # Create session
        session_response = service.create_session(CreateSessionRequest())

        # Submit a word
        verdict = service.submit_word(session_id, SubmitWordRequest(word="silk"))
    """
    session_manager: SessionManager
    config: ScrambleConfig = field(default_factory=ScrambleConfig)

    @classmethod
    def from_config(cls, config: ScrambleConfig) -> APIService:
        """Build the service with the dictionary and word pool named by config."""
        manager = SessionManager(
            dictionary=create_dictionary(config),
            word_source=FileWordSource(config.word_pool_path),
            language=config.language,
        )
        return cls(session_manager=manager, config=config)

    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """
        Create a new game session with a started game.

        Sessions idle longer than config.session_ttl_seconds are
        ended first.

        Raises:
            WordPoolError: if the word pool cannot supply a root word
        """
        self.session_manager.cleanup_stale_sessions(self.config.session_ttl_seconds)
        session = self.session_manager.create_session(player_name=request.player_name)
        return self._session_to_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        """
        Get session status and current game.
        """
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._session_to_response(session)

    def submit_word(
        self,
        session_id: str,
        request: SubmitWordRequest,
    ) -> SubmitWordResponse | ErrorResponse:
        """
        Submit a word for the session's current game.
        """
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        session.touch()
        result = session.game.submit_word(request.word)
        return self._result_to_response(session_id, result)

    def new_game(
        self,
        session_id: str,
        request: NewGameRequest | None = None,
    ) -> SessionResponse | ErrorResponse:
        """
        Start a new round: new root word, used words cleared.

        Raises:
            WordPoolError: if the word pool cannot supply a root word
        """
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        request = request or NewGameRequest()
        session.touch()
        session.game.reset_game(reset_score=request.reset_score)
        return self._session_to_response(session)

    def end_session(self, session_id: str, reason: str = "user_ended") -> bool:
        """
        End a session.

        Returns True if session was found and ended.
        """
        return self.session_manager.end_session(session_id, reason)

    def list_sessions(self) -> list[str]:
        """
        List active session IDs.
        """
        return self.session_manager.list_active_sessions()

    def health(self) -> HealthResponse:
        """Report service health."""
        return HealthResponse(
            version=__version__,
            environment=self.config.env,
            dictionary_available=self.session_manager.dictionary.available,
        )

    # =========================================================================
    # Conversion helpers
    # =========================================================================

    def _not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )

    def _session_to_response(self, session: Session) -> SessionResponse:
        return SessionResponse(
            session_id=session.session_id,
            player_name=session.player_name,
            created_at=session.created_at,
            game=self._state_to_info(session.game.state),
        )

    def _result_to_response(self, session_id: str, result: SubmitResult) -> SubmitWordResponse:
        return SubmitWordResponse(
            session_id=session_id,
            outcome=SubmissionOutcome(result.outcome.value),
            word=result.word,
            reason=RejectionReason(result.reason.value) if result.reason else None,
            score_delta=result.score_delta,
            title=result.title,
            message=result.message,
            game=self._state_to_info(result.new_state),
        )

    def _state_to_info(self, state: GameState) -> GameStateInfo:
        return GameStateInfo(
            root_word=state.root_word,
            used_words=[UsedWordInfo(word=w, length=len(w)) for w in state.used_words],
            score=state.score,
        )
