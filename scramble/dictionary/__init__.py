"""
Dictionary module - Spell-check backends for the legitimacy check.

Provides:
- Dictionary: Interface every backend implements
- WordListDictionary: Set of words loaded from a text file
- WordfreqDictionary: Frequency-based recognition using wordfreq
- create_dictionary: Build the backend named in configuration
"""

from .base import Dictionary
from .wordlist import WordListDictionary
from .frequency import WordfreqDictionary, DEFAULT_MIN_ZIPF
from .factory import create_dictionary, BACKENDS

__all__ = [
    "Dictionary",
    "WordListDictionary",
    "WordfreqDictionary",
    "DEFAULT_MIN_ZIPF",
    "create_dictionary",
    "BACKENDS",
]
