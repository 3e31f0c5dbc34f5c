"""
FastAPI Application - REST API for the word scramble game.

Endpoints:
    GET    /api/v1/health                      Health check
    POST   /api/v1/sessions                    Create session and start a game
    GET    /api/v1/sessions                    List active sessions
    GET    /api/v1/sessions/{id}               Get session and game state
    DELETE /api/v1/sessions/{id}               End session
    POST   /api/v1/sessions/{id}/words         Submit a word
    POST   /api/v1/sessions/{id}/new-game      New root word, score kept

All responses are JSON with explicit Pydantic schemas.
Run with: uvicorn scramble.api.app:create_app --factory
"""

from typing import Optional, Union
import logging

from fastapi import FastAPI, Body, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import ScrambleConfig
from ..errors import WordPoolError
from .service import APIService
from .schemas import (
    # Request models
    CreateSessionRequest,
    SubmitWordRequest,
    NewGameRequest,
    # Response models
    SessionResponse,
    SubmitWordResponse,
    ErrorResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    # Enums
    ErrorCode,
)

logger = logging.getLogger(__name__)


def create_app(service: Optional[APIService] = None, config: Optional[ScrambleConfig] = None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (built from config if not provided)
        config: Optional config (read from the environment if not provided)

    Returns:
        FastAPI application instance
    """
    config = config or (service.config if service else ScrambleConfig.from_env())
    api_service = service or APIService.from_config(config)

    app = FastAPI(
        title="Word Scramble API",
        description="""
Form new words from the letters of a root word.

## Scoring

| Verdict | Points |
|---------|--------|
| accepted | +10 |
| `already_used` | -2 |
| `not_composable` | -3 |
| `not_a_real_word` | -5 |

Rejected words are normal game outcomes and return `200`.

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
| `WORD_POOL_UNAVAILABLE` | No root word available, game cannot start |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    def not_found(response: ErrorResponse) -> JSONResponse:
        return make_error_response(response.error_code, response.error, status_code=404)

    @app.exception_handler(WordPoolError)
    async def word_pool_error_handler(request: Request, exc: WordPoolError) -> JSONResponse:
        logger.error("Cannot start game: %s", exc)
        return make_error_response(
            ErrorCode.WORD_POOL_UNAVAILABLE,
            str(exc),
            status_code=503,
        )

    # =========================================================================
    # Health
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    def health() -> HealthResponse:
        return api_service.health()

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        status_code=201,
        responses={503: {"model": ErrorResponse, "description": "Word pool unavailable"}},
        tags=["Sessions"],
        summary="Create a session and start a game",
    )
    def create_session(
        body: Optional[CreateSessionRequest] = Body(None),
    ) -> SessionResponse:
        """
        Create a new game session.

        The response carries the root word to play with.
        """
        return api_service.create_session(body or CreateSessionRequest())

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    def list_sessions() -> SessionListResponse:
        """List all active session IDs."""
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session and game state",
    )
    def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        """Get the root word, used words, and score of a session."""
        response = api_service.get_session(session_id)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    def end_session(
        session_id: str,
        reason: str = Query("user_ended", description="Reason for ending"),
    ) -> EndSessionResponse:
        """End a game session and release its state."""
        success = api_service.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions/{session_id}/words",
        response_model=SubmitWordResponse,
        responses={404: {"model": ErrorResponse, "description": "Session not found"}},
        tags=["Game"],
        summary="Submit a word",
    )
    def submit_word(
        session_id: str,
        body: SubmitWordRequest,
    ) -> Union[SubmitWordResponse, JSONResponse]:
        """
        Submit a candidate word.

        **Request Body:**
        ```json
        {"word": "silk"}
        ```

        Whitespace-only words are ignored (`outcome=ignored`, no score change).
        """
        response = api_service.submit_word(session_id, body)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/new-game",
        response_model=SessionResponse,
        responses={
            404: {"model": ErrorResponse, "description": "Session not found"},
            503: {"model": ErrorResponse, "description": "Word pool unavailable"},
        },
        tags=["Game"],
        summary="Start a new game in the same session",
    )
    def new_game(
        session_id: str,
        body: Optional[NewGameRequest] = Body(None),
    ) -> Union[SessionResponse, JSONResponse]:
        """Draw a new root word and clear used words. The score is kept by default."""
        response = api_service.new_game(session_id, body)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    return app
