"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between a client UI and the engine.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has expired
- WORD_POOL_UNAVAILABLE: No root word could be drawn, game cannot start
- VALIDATION_ERROR: Request body failed validation
- INTERNAL_ERROR: Unexpected server failure
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SubmissionOutcome(str, Enum):
    """Outcome of a word submission."""
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    IGNORED = "ignored"


class RejectionReason(str, Enum):
    """Which check rejected the word."""
    ALREADY_USED = "already_used"
    NOT_COMPOSABLE = "not_composable"
    NOT_A_REAL_WORD = "not_a_real_word"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    WORD_POOL_UNAVAILABLE = "WORD_POOL_UNAVAILABLE"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class UsedWordInfo(BaseModel):
    """An accepted word with its length indicator."""
    word: str
    length: int

    model_config = {"from_attributes": True}


class GameStateInfo(BaseModel):
    """Everything the UI needs to draw the game screen."""
    root_word: str
    used_words: list[UsedWordInfo] = Field(
        default_factory=list, description="Most recent first"
    )
    score: int = 0

    model_config = {"from_attributes": True}


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to create a new game session."""
    player_name: str = Field("Player", min_length=1, max_length=64, description="Display name")


class SubmitWordRequest(BaseModel):
    """A candidate word typed by the player."""
    word: str = Field(..., description="Raw text, any length, case, or whitespace")


class NewGameRequest(BaseModel):
    """Request to start a new round in the same session."""
    reset_score: bool = Field(False, description="Also reset the score to zero")


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class SessionResponse(BaseModel):
    """Response containing session information and the current game."""
    session_id: str
    player_name: str
    created_at: float = 0.0
    game: GameStateInfo
    api_version: str = "v1"


class SubmitWordResponse(BaseModel):
    """
    Verdict for one submission.

    Rejections are game outcomes and come back with status 200.
    title/message are set for accepted and rejected words.
    """
    session_id: str
    outcome: SubmissionOutcome
    word: str = Field("", description="Normalized word that was judged")
    reason: Optional[RejectionReason] = None
    score_delta: int = 0
    title: Optional[str] = None
    message: Optional[str] = None
    game: GameStateInfo
    api_version: str = "v1"


class SessionListResponse(BaseModel):
    """List of active session IDs."""
    sessions: list[str] = Field(default_factory=list)
    count: int = 0
    api_version: str = "v1"


class EndSessionResponse(BaseModel):
    """Response from ending a session."""
    success: bool
    session_id: str
    api_version: str = "v1"


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    version: str
    environment: str
    dictionary_available: bool = True
    api_version: str = "v1"
