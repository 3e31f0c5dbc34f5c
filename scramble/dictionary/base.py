"""
Dictionary - Interface for the spell-check oracle.

A Dictionary answers one question: is this string a recognized word
in the given language? Lookups are case-insensitive and never mutate
the dictionary.

If the backing resource is unavailable, implementations reject the
word (return False) instead of raising, so a missing backend can
never end a game session.
"""

from __future__ import annotations
from abc import ABC, abstractmethod


class Dictionary(ABC):
    """
    Abstract base class for dictionary backends.
    """

    @property
    def available(self) -> bool:
        """Whether the backend can answer lookups."""
        return True

    @abstractmethod
    def is_recognized_word(self, word: str, language: str = "en") -> bool:
        """
        Check if word is a real word in language.

        Args:
            word: Candidate word, any case
            language: Language code, e.g. "en"

        Returns:
            True if recognized, False otherwise (including when unavailable)
        """
        pass
