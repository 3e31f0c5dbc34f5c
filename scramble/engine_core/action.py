"""
Submission results - Verdicts, rejection reasons, and penalties.

A submission always produces a SubmitResult. Rejections are ordinary
game outcomes, not errors, so they are returned rather than raised.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import GameState


ACCEPT_POINTS = 10
MIN_WORD_LENGTH = 3


class Outcome(Enum):
    """What happened to a submission."""
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    IGNORED = "ignored"  # Empty after normalization


class RejectionReason(Enum):
    """Which validation stage failed."""
    ALREADY_USED = "already_used"
    NOT_COMPOSABLE = "not_composable"
    NOT_A_REAL_WORD = "not_a_real_word"

    @property
    def penalty(self) -> int:
        return PENALTIES[self]


PENALTIES = {
    RejectionReason.ALREADY_USED: 2,
    RejectionReason.NOT_COMPOSABLE: 3,
    RejectionReason.NOT_A_REAL_WORD: 5,
}

_TITLES = {
    RejectionReason.ALREADY_USED: "Word used already",
    RejectionReason.NOT_COMPOSABLE: "Word not possible",
    RejectionReason.NOT_A_REAL_WORD: "Word not recognized",
}


def rejection_message(reason: RejectionReason, root_word: str) -> tuple[str, str]:
    """Return the (title, message) pair shown to the player for a rejection."""
    penalty = reason.penalty
    if reason == RejectionReason.ALREADY_USED:
        message = f"Be more original. You lose {penalty} score points."
    elif reason == RejectionReason.NOT_COMPOSABLE:
        message = (
            f"You can't spell that word from '{root_word}'. "
            f"You lose {penalty} score points."
        )
    else:
        message = (
            "That word is shorter than 3 letters, is the root word, "
            f"or doesn't exist. You lose {penalty} score points."
        )
    return _TITLES[reason], message


@dataclass
class SubmitResult:
    """
    Result of submitting a word.

    Contains:
    - The outcome and, for rejections, the reason
    - The normalized word that was judged
    - The state after the submission (unchanged for IGNORED)
    - A title/message pair for presentation
    """
    outcome: Outcome
    word: str
    new_state: GameState
    reason: RejectionReason | None = None
    score_delta: int = 0
    title: str | None = None
    message: str | None = None

    @property
    def accepted(self) -> bool:
        return self.outcome == Outcome.ACCEPTED

    @property
    def new_score(self) -> int:
        return self.new_state.score

    @classmethod
    def accept(cls, word: str, state: GameState) -> SubmitResult:
        """Create an accepted result."""
        return cls(
            outcome=Outcome.ACCEPTED,
            word=word,
            new_state=state,
            score_delta=ACCEPT_POINTS,
            title="Nice word",
            message=f"'{word}' is worth {ACCEPT_POINTS} points.",
        )

    @classmethod
    def reject(cls, word: str, state: GameState, reason: RejectionReason) -> SubmitResult:
        """Create a rejected result. state must already carry the penalty."""
        title, message = rejection_message(reason, state.root_word)
        return cls(
            outcome=Outcome.REJECTED,
            word=word,
            new_state=state,
            reason=reason,
            score_delta=-reason.penalty,
            title=title,
            message=message,
        )

    @classmethod
    def ignore(cls, state: GameState) -> SubmitResult:
        """Create a no-op result for an empty submission."""
        return cls(outcome=Outcome.IGNORED, word="", new_state=state)
