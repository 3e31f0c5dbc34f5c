"""
Engine Core - Deterministic game state and submission validation.

The engine is the runtime that:
1. Holds GameState
2. Normalizes submissions
3. Runs the originality, composability, and legitimacy checks
4. Applies the resulting score change
"""

from .state import GameState
from .action import (
    Outcome,
    RejectionReason,
    SubmitResult,
    ACCEPT_POINTS,
    MIN_WORD_LENGTH,
    PENALTIES,
    rejection_message,
)
from .reducer import (
    Reducer,
    apply_submission,
    normalize_word,
    is_original,
    is_possible,
    is_real,
)

__all__ = [
    "GameState",
    "Outcome",
    "RejectionReason",
    "SubmitResult",
    "ACCEPT_POINTS",
    "MIN_WORD_LENGTH",
    "PENALTIES",
    "rejection_message",
    "Reducer",
    "apply_submission",
    "normalize_word",
    "is_original",
    "is_possible",
    "is_real",
]
