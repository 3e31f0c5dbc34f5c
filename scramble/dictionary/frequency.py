"""
Frequency dictionary - Recognizes words via the wordfreq corpus.

A word counts as real when its Zipf frequency in the language is at
least min_zipf. Zipf is log-scaled: 0 means never seen, 3 is roughly
once per million words, the most common words sit around 7.
Typos and web-crawl noise reach roughly 1.5, so the default
threshold sits above that.
"""

from __future__ import annotations
import logging

from wordfreq import zipf_frequency

from .base import Dictionary

logger = logging.getLogger(__name__)

DEFAULT_MIN_ZIPF = 2.5


class WordfreqDictionary(Dictionary):
    """
    Dictionary backed by wordfreq.

    Lookup failures (unsupported language, missing data files) are
    logged and reported as "not recognized".
    """

    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF, wordlist: str = "best"):
        self.min_zipf = min_zipf
        self.wordlist = wordlist

    def frequency(self, word: str, language: str = "en") -> float:
        """Return the Zipf frequency of word, 0.0 if unknown."""
        return zipf_frequency(word.strip().lower(), language, wordlist=self.wordlist)

    def is_recognized_word(self, word: str, language: str = "en") -> bool:
        word = word.strip().lower()
        if not word or not word.isalpha():
            return False
        try:
            return self.frequency(word, language) >= self.min_zipf
        except (LookupError, OSError, ValueError) as e:
            logger.warning("wordfreq lookup failed for %r (%s): %s", word, language, e)
            return False
