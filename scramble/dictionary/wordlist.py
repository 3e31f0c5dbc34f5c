"""
Word list dictionary - A set of known words loaded from a text file.

File format (one word per line):
    apple
    silk
    worm
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable

from .base import Dictionary

logger = logging.getLogger(__name__)


class WordListDictionary(Dictionary):
    """
    In-memory dictionary for a single language.

    Usage:
        dictionary = WordListDictionary.load("words.txt")
        dictionary.is_recognized_word("Silk", "en")  # True
    """

    def __init__(
        self,
        words: Iterable[str] | None = None,
        language: str = "en",
        available: bool = True,
    ):
        self.language = language.lower()
        self._available = available
        self._words: set[str] = {
            w.strip().lower() for w in (words or ()) if w and w.strip()
        }

    @classmethod
    def load(cls, path: str | Path, language: str = "en") -> WordListDictionary:
        """
        Load a word list from disk.

        A missing or unreadable file produces an unavailable dictionary
        that rejects every word.
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8", errors="ignore") as f:
                words = [line for line in f]
        except OSError as e:
            logger.warning("Word list %s unavailable (%s); all words will be rejected", path, e)
            return cls(language=language, available=False)

        dictionary = cls(words=words, language=language)
        logger.info("Loaded %s words from %s", len(dictionary), path)
        return dictionary

    @property
    def available(self) -> bool:
        return self._available

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return self.is_recognized_word(word, self.language)

    def is_recognized_word(self, word: str, language: str = "en") -> bool:
        if not self._available or not word:
            return False
        if language.lower() != self.language:
            return False
        return word.strip().lower() in self._words
