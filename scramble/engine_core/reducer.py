"""
Reducer - Applies word submissions to game state.

The reducer is the single point of state transition.
All changes to used words and score go through submit().

Design principles:
- Pure function: (state, raw word) -> SubmitResult carrying the new state
- Checks run in a fixed order; the first failing check decides the penalty
- At most one penalty per submission
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

from .state import GameState
from .action import (
    ACCEPT_POINTS,
    MIN_WORD_LENGTH,
    RejectionReason,
    SubmitResult,
)

if TYPE_CHECKING:
    from ..dictionary import Dictionary

logger = logging.getLogger(__name__)


def normalize_word(raw: str) -> str:
    """Lowercase and trim surrounding whitespace."""
    return raw.strip().lower()


def is_original(state: GameState, word: str) -> bool:
    return not state.has_used(word)


def is_possible(root_word: str, word: str) -> bool:
    """
    Check that word can be spelled from the letters of root_word.

    Each root letter can be used at most as many times as it appears.
    """
    remaining = Counter(root_word)
    for letter in word:
        if remaining[letter] <= 0:
            return False
        remaining[letter] -= 1
    return True


def is_real(
    root_word: str,
    word: str,
    dictionary: Dictionary,
    language: str = "en",
) -> bool:
    """Check length, reject the root word itself, then ask the dictionary."""
    if len(word) < MIN_WORD_LENGTH:
        return False
    if word == root_word:
        return False
    return dictionary.is_recognized_word(word, language)


@dataclass
class Reducer:
    """
    Reducer applies submissions to game state.

    Stateless - all state is in GameState.
    The dictionary answers the legitimacy check.
    """
    dictionary: Dictionary
    language: str = "en"

    def submit(self, state: GameState, raw: str) -> SubmitResult:
        """
        Validate a raw submission against state.

        Returns SubmitResult whose new_state is the state to keep.
        """
        word = normalize_word(raw)
        if not word:
            return SubmitResult.ignore(state)

        reason = self._first_failure(state, word)
        if reason is not None:
            logger.debug("Rejected %r (%s) for root %r", word, reason.value, state.root_word)
            return SubmitResult.reject(
                word,
                state.with_score_delta(-reason.penalty),
                reason,
            )

        logger.debug("Accepted %r for root %r", word, state.root_word)
        return SubmitResult.accept(word, state.with_accepted_word(word, ACCEPT_POINTS))

    def _first_failure(self, state: GameState, word: str) -> RejectionReason | None:
        """Run the checks in order and return the first failing reason."""
        if not is_original(state, word):
            return RejectionReason.ALREADY_USED
        if not is_possible(state.root_word, word):
            return RejectionReason.NOT_COMPOSABLE
        if not is_real(state.root_word, word, self.dictionary, self.language):
            return RejectionReason.NOT_A_REAL_WORD
        return None


def apply_submission(
    dictionary: Dictionary,
    state: GameState,
    raw: str,
    language: str = "en",
) -> SubmitResult:
    """Convenience function to apply a submission without keeping a Reducer."""
    return Reducer(dictionary=dictionary, language=language).submit(state, raw)
