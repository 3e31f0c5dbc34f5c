"""Exceptions for conditions that stop a game from starting."""


class ScrambleError(Exception):
    """Base class for fatal engine errors."""


class WordPoolError(ScrambleError):
    """The root-word pool is missing, unreadable, or empty."""
