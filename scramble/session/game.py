"""
Game Session - Owns one player's GameState and drives the rules.

The session is the only place GameState is replaced. Each operation
computes the next state through the reducer and swaps it in with a
single assignment, so callers never observe a half-applied submission.

Presentation layers either poll `session.state` or register a
listener with `subscribe()` to be told about every change.
"""

from __future__ import annotations
import logging
from typing import Callable, TYPE_CHECKING

from ..engine_core.state import GameState
from ..engine_core.action import Outcome, SubmitResult
from ..engine_core.reducer import Reducer

if TYPE_CHECKING:
    from ..dictionary import Dictionary
    from ..words import WordSource

logger = logging.getLogger(__name__)

StateListener = Callable[[GameState], None]


class GameNotStartedError(RuntimeError):
    """Raised when a submission arrives before start_game()."""


class GameSession:
    """
    A single-player word scramble game.

    Usage:
        game = GameSession(dictionary, word_source)
        game.start_game()

        result = game.submit_word("silk")
        if not result.accepted:
            show_alert(result.title, result.message)

        game.reset_game()  # New root word, score kept
    """

    def __init__(
        self,
        dictionary: Dictionary,
        word_source: WordSource,
        language: str = "en",
    ):
        self.word_source = word_source
        self.reducer = Reducer(dictionary=dictionary, language=language)
        self._state: GameState | None = None
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> GameState | None:
        return self._state

    @property
    def is_started(self) -> bool:
        return self._state is not None

    def start_game(self) -> GameState:
        """
        Start a fresh game: random root word, no used words, score 0.

        Raises:
            WordPoolError: if no root word can be drawn
        """
        root_word = self.word_source.pick_random()
        self._set_state(GameState(root_word=root_word))
        logger.info("Game started with root word %r", self._state.root_word)
        return self._state

    def reset_game(self, reset_score: bool = False) -> GameState:
        """
        New game: clear used words and draw a new root word.

        The score carries over unless reset_score is True.
        """
        if self._state is None:
            return self.start_game()

        root_word = self.word_source.pick_random()
        self._set_state(self._state.with_new_root(root_word, reset_score=reset_score))
        logger.info(
            "Game reset with root word %r (score %s)",
            self._state.root_word,
            self._state.score,
        )
        return self._state

    def submit_word(self, raw: str) -> SubmitResult:
        """
        Submit a candidate word.

        Empty submissions are ignored; everything else yields exactly
        one verdict and one score change.
        """
        if self._state is None:
            raise GameNotStartedError("start_game() must be called before submitting words")

        result = self.reducer.submit(self._state, raw)
        if result.outcome != Outcome.IGNORED:
            self._set_state(result.new_state)
        return result

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with the new state after every change.

        Exceptions raised by a listener are logged and do not reach the
        caller of start_game, submit_word or reset_game.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: GameState):
        self._state = state
        # State is committed before listeners run; listener errors are only logged
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener %r failed", listener)
