"""Build the configured Dictionary backend."""

from __future__ import annotations
from typing import TYPE_CHECKING

from .base import Dictionary
from .frequency import WordfreqDictionary
from .wordlist import WordListDictionary

if TYPE_CHECKING:
    from ..config import ScrambleConfig

BACKENDS = ("wordfreq", "wordlist")


def create_dictionary(config: ScrambleConfig) -> Dictionary:
    """
    Create the dictionary named by config.dictionary_backend.

    Raises:
        ValueError: unknown backend, or wordlist backend without a path
    """
    backend = config.dictionary_backend.lower()
    if backend == "wordfreq":
        return WordfreqDictionary(min_zipf=config.min_zipf)
    if backend == "wordlist":
        if not config.wordlist_path:
            raise ValueError("wordlist dictionary requires SCRAMBLE_WORDLIST to be set")
        return WordListDictionary.load(config.wordlist_path, language=config.language)
    raise ValueError(f"Unknown dictionary backend: {config.dictionary_backend}")
