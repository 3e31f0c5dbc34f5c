"""
Word Source - The pool of root words a game can start from.

The pool is a newline-delimited list of lowercase words, loaded once
and never modified afterwards. A pool that cannot be read or holds no
words is fatal: no game can start without a root word.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
import logging
import random
from typing import Sequence

from ..errors import WordPoolError

logger = logging.getLogger(__name__)

BUNDLED_POOL = "start.txt"


def parse_pool(text: str) -> list[str]:
    """Split pool text into words, dropping blank lines."""
    words = []
    for line in text.splitlines():
        word = line.strip().lower()
        if word:
            words.append(word)
    return words


class WordSource(ABC):
    """
    Abstract source of root words.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self._pool: list[str] | None = None

    @abstractmethod
    def load_pool(self) -> list[str]:
        """
        Load the pool of root words.

        Raises:
            WordPoolError: if the pool cannot be read
        """
        pass

    @property
    def pool(self) -> list[str]:
        """The loaded pool, read on first access and cached."""
        if self._pool is None:
            self._pool = self.load_pool()
        return self._pool

    def pick_random(self, pool: Sequence[str] | None = None) -> str:
        """
        Pick one word uniformly at random.

        Raises:
            WordPoolError: if the pool is empty
        """
        if pool is None:
            pool = self.pool
        if not pool:
            raise WordPoolError("Word pool is empty; cannot pick a root word")
        return self.rng.choice(pool)


class FileWordSource(WordSource):
    """
    Word source reading a text file.

    With no path, the pool bundled with the package is used.
    """

    def __init__(self, path: str | Path | None = None, rng: random.Random | None = None):
        super().__init__(rng=rng)
        self.path = Path(path) if path else None

    def load_pool(self) -> list[str]:
        try:
            if self.path is None:
                text = resources.files(__package__).joinpath(BUNDLED_POOL).read_text(encoding="utf-8")
                origin = f"bundled {BUNDLED_POOL}"
            else:
                text = self.path.read_text(encoding="utf-8")
                origin = str(self.path)
        except OSError as e:
            raise WordPoolError(f"Could not load word pool: {e}") from e

        words = parse_pool(text)
        if not words:
            raise WordPoolError(f"Word pool {origin} contains no words")

        logger.info("Loaded %s root words from %s", len(words), origin)
        return words


class StaticWordSource(WordSource):
    """Word source over an in-memory list."""

    def __init__(self, words: Sequence[str], rng: random.Random | None = None):
        super().__init__(rng=rng)
        self._words = list(words)

    def load_pool(self) -> list[str]:
        words = [w.strip().lower() for w in self._words if w and w.strip()]
        if not words:
            raise WordPoolError("Word pool contains no words")
        return words
