"""
Pytest fixtures for Scramble tests.
"""

import random

import pytest

from ..config import ScrambleConfig
from ..dictionary import WordListDictionary
from ..engine_core.state import GameState
from ..engine_core.reducer import Reducer
from ..session import GameSession, SessionManager
from ..words import StaticWordSource
from ..api.service import APIService


SILKWORM_WORDS = [
    "silk", "worm", "milk", "silo", "slow", "work", "works", "owl",
    "mow", "row", "rim", "skim", "swirl", "limo", "silkworm", "is", "or",
]


@pytest.fixture
def dictionary() -> WordListDictionary:
    """Small deterministic English dictionary."""
    return WordListDictionary(SILKWORM_WORDS, language="en")


@pytest.fixture
def word_source() -> StaticWordSource:
    """Pool holding only 'silkworm'."""
    return StaticWordSource(["silkworm"], rng=random.Random(7))


@pytest.fixture
def reducer(dictionary) -> Reducer:
    return Reducer(dictionary=dictionary)


@pytest.fixture
def silkworm_state() -> GameState:
    """Fresh state for root word 'silkworm'."""
    return GameState(root_word="silkworm")


@pytest.fixture
def game(dictionary, word_source) -> GameSession:
    """Started game session on 'silkworm'."""
    session = GameSession(dictionary, word_source)
    session.start_game()
    return session


@pytest.fixture
def session_manager(dictionary, word_source) -> SessionManager:
    return SessionManager(dictionary=dictionary, word_source=word_source)


@pytest.fixture
def service(session_manager) -> APIService:
    """API service with deterministic collaborators."""
    return APIService(session_manager=session_manager, config=ScrambleConfig())
