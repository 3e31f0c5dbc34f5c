"""
Words module - Root word pools.

Provides:
- WordSource: Interface for a pool of root words
- FileWordSource: Pool read from a text file (bundled start.txt by default)
- StaticWordSource: Pool from an in-memory list
"""

from .source import WordSource, FileWordSource, StaticWordSource, parse_pool, BUNDLED_POOL
from ..errors import WordPoolError

__all__ = [
    "WordSource",
    "FileWordSource",
    "StaticWordSource",
    "parse_pool",
    "BUNDLED_POOL",
    "WordPoolError",
]
