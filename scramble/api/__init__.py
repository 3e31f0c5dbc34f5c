"""
API Module - HTTP interface for client UIs.

Exposes the engine via REST API. A client:
1. Creates a session (gets a root word)
2. Submits words and shows the verdicts
3. Starts new games within the session
4. Ends the session when done

All state is session-scoped. No persistent user accounts.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    SubmitWordRequest,
    NewGameRequest,
    # Responses
    SessionResponse,
    SubmitWordResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    ErrorResponse,
    # Shared
    GameStateInfo,
    UsedWordInfo,
    # Enums
    ErrorCode,
    SubmissionOutcome,
    RejectionReason,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "SubmitWordRequest",
    "NewGameRequest",
    # Responses
    "SessionResponse",
    "SubmitWordResponse",
    "SessionListResponse",
    "EndSessionResponse",
    "HealthResponse",
    "ErrorResponse",
    # Shared
    "GameStateInfo",
    "UsedWordInfo",
    # Enums
    "ErrorCode",
    "SubmissionOutcome",
    "RejectionReason",
    # Service
    "APIService",
    "create_app",
]
