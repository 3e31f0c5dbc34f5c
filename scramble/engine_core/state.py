"""
Game State - The canonical state of one word scramble game.

Design principles:
- Immutable-friendly: all transitions return a new state
- Owned by a single GameSession, never shared
- Plain data: no rendering or notification concerns live here
"""

from __future__ import annotations
from dataclasses import dataclass, field
from copy import deepcopy


@dataclass
class GameState:
    """
    Complete game state at a point in time.

    used_words is ordered most-recent-first and never holds duplicates
    or the root word itself. score is a plain accumulator with no floor.
    """
    root_word: str
    used_words: list[str] = field(default_factory=list)
    score: int = 0

    def __post_init__(self):
        if not self.root_word or not self.root_word.strip():
            raise ValueError("root_word must be a non-empty string")
        self.root_word = self.root_word.strip().lower()

    @property
    def word_count(self) -> int:
        return len(self.used_words)

    def has_used(self, word: str) -> bool:
        """Check if a normalized word was already accepted."""
        return word in self.used_words

    def with_score_delta(self, delta: int) -> GameState:
        """Return new state with the score adjusted by delta."""
        return self._copy_with(score=self.score + delta)

    def with_accepted_word(self, word: str, points: int) -> GameState:
        """Return new state with word at the front of used_words and points added."""
        return self._copy_with(
            used_words=[word] + self.used_words,
            score=self.score + points,
        )

    def with_new_root(self, root_word: str, reset_score: bool = False) -> GameState:
        """Return new state for a fresh round: new root, no used words."""
        return GameState(
            root_word=root_word,
            used_words=[],
            score=0 if reset_score else self.score,
        )

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return GameState(
            root_word=kwargs.get("root_word", self.root_word),
            used_words=kwargs.get("used_words", self.used_words.copy()),
            score=kwargs.get("score", self.score),
        )

    def clone(self) -> GameState:
        """Deep copy the state."""
        return deepcopy(self)
