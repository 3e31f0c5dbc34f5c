"""
Tests for GameSession and SessionManager.

Tests:
- Game start and new game
- Submission flow and state ownership
- Listener notifications
- Session lifecycle
"""

import logging
import random

import pytest

from ..engine_core.action import Outcome, RejectionReason
from ..errors import WordPoolError
from ..session import GameSession, GameNotStartedError, SessionManager
from ..words import StaticWordSource


class TestStartGame:
    """Tests for starting a game."""

    def test_start_draws_root_word(self, game):
        assert game.is_started
        assert game.state.root_word == "silkworm"
        assert game.state.used_words == []
        assert game.state.score == 0

    def test_root_word_comes_from_pool(self, dictionary):
        pool = ["silkworm", "baseball", "computer"]
        game = GameSession(dictionary, StaticWordSource(pool, rng=random.Random(3)))

        for _ in range(10):
            game.start_game()
            assert game.state.root_word in pool

    def test_root_word_lowercased(self, dictionary):
        game = GameSession(dictionary, StaticWordSource(["SilkWorm"]))
        game.start_game()

        assert game.state.root_word == "silkworm"

    def test_empty_pool_cannot_start(self, dictionary):
        """An empty pool is fatal and leaves no state behind."""
        game = GameSession(dictionary, StaticWordSource([]))

        with pytest.raises(WordPoolError):
            game.start_game()
        assert game.state is None

    def test_submit_before_start_fails(self, dictionary, word_source):
        game = GameSession(dictionary, word_source)

        with pytest.raises(GameNotStartedError):
            game.submit_word("silk")


class TestSubmitWord:
    """Tests for submissions through the session."""

    def test_accepted_word_updates_state(self, game):
        result = game.submit_word("silk")

        assert result.accepted
        assert game.state.used_words == ["silk"]
        assert game.state.score == 10

    def test_spec_examples_in_sequence(self, game):
        """silk, silk again, then the root word itself."""
        game.submit_word("silk")
        second = game.submit_word("silk")
        third = game.submit_word("silkworm")

        assert second.reason == RejectionReason.ALREADY_USED
        assert third.reason == RejectionReason.NOT_A_REAL_WORD
        assert game.state.score == 10 - 2 - 5
        assert game.state.used_words == ["silk"]

    def test_whitespace_submission_changes_nothing(self, game):
        game.submit_word("silk")
        before = game.state

        result = game.submit_word("   ")

        assert result.outcome == Outcome.IGNORED
        assert game.state is before


class TestResetGame:
    """Tests for the new game action."""

    def test_reset_keeps_score(self, game):
        game.submit_word("silk")
        game.submit_word("worm")

        game.reset_game()

        assert game.state.used_words == []
        assert game.state.score == 20
        assert game.state.root_word == "silkworm"

    def test_reset_allows_reusing_words(self, game):
        game.submit_word("silk")
        game.reset_game()

        assert game.submit_word("silk").accepted

    def test_reset_score_flag(self, game):
        game.submit_word("silk")
        game.reset_game(reset_score=True)

        assert game.state.score == 0

    def test_reset_before_start_starts_game(self, dictionary, word_source):
        game = GameSession(dictionary, word_source)
        state = game.reset_game()

        assert state.root_word == "silkworm"
        assert state.score == 0


class TestSubscribe:
    """Tests for state listeners."""

    def test_listener_sees_every_change(self, dictionary, word_source):
        game = GameSession(dictionary, word_source)
        seen = []
        game.subscribe(seen.append)

        game.start_game()
        game.submit_word("silk")
        game.submit_word("silkk")
        game.submit_word("  ")
        game.reset_game()

        assert [s.score for s in seen] == [0, 10, 7, 7]
        assert seen[1].used_words == ["silk"]
        assert seen[-1].used_words == []

    def test_unsubscribe(self, game):
        seen = []
        unsubscribe = game.subscribe(seen.append)

        game.submit_word("silk")
        unsubscribe()
        game.submit_word("worm")

        assert len(seen) == 1

    def test_failing_listener_does_not_block_verdict(self, game, caplog):
        """A raising listener is logged; the result still comes back."""
        seen = []

        def broken(state):
            raise RuntimeError("render failed")

        game.subscribe(broken)
        game.subscribe(seen.append)

        with caplog.at_level(logging.ERROR):
            result = game.submit_word("silk")

        assert result.accepted
        assert game.state.score == 10
        assert seen[-1].used_words == ["silk"]
        assert "State listener" in caplog.text


class TestSessionManager:
    """Tests for session lifecycle."""

    def test_create_session_starts_game(self, session_manager):
        session = session_manager.create_session(player_name="Ada")

        assert session.player_name == "Ada"
        assert session.game.state.root_word == "silkworm"
        assert session_manager.get_session(session.session_id) is session

    def test_sessions_are_independent(self, session_manager):
        first = session_manager.create_session()
        second = session_manager.create_session()

        first.game.submit_word("silk")

        assert second.game.state.used_words == []
        assert second.game.state.score == 0

    def test_end_session(self, session_manager):
        session = session_manager.create_session()

        assert session_manager.end_session(session.session_id)
        assert session_manager.get_session(session.session_id) is None
        assert not session_manager.end_session(session.session_id)

    def test_list_active_sessions(self, session_manager):
        ids = {session_manager.create_session().session_id for _ in range(3)}

        assert set(session_manager.list_active_sessions()) == ids

    def test_failed_start_registers_nothing(self, dictionary):
        manager = SessionManager(dictionary, StaticWordSource([]))

        with pytest.raises(WordPoolError):
            manager.create_session()
        assert manager.list_active_sessions() == []

    def test_cleanup_stale_sessions(self, session_manager):
        stale = session_manager.create_session()
        fresh = session_manager.create_session()
        stale.last_activity -= 7200

        removed = session_manager.cleanup_stale_sessions(max_age_seconds=3600)

        assert removed == 1
        assert session_manager.get_session(stale.session_id) is None
        assert session_manager.get_session(fresh.session_id) is fresh
