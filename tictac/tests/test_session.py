"""
Tests for sessions and game handles.

Tests:
- Session lifecycle in the manager
- Handles reading and dispatching their own game
- Handles behaving like the reducer
"""

from dataclasses import fields

import pytest

from ..engine_core.board import Mark
from ..engine_core.intent import Intent
from ..engine_core.reducer import StepOutOfRange
from ..engine_core.state import GameState
from .conftest import X_WINS_SQUARES, play


class TestSessionManager:
    """Tests for SessionManager."""

    def test_create_session(self, manager):
        session = manager.create_session(num_games=2)
        assert session.num_games == 2
        assert session.session_id in manager.list_active_sessions()
        assert manager.get_session(session.session_id) is session

    def test_session_fields(self, manager):
        """A session is its id, store, creation time and handles."""
        session = manager.create_session()
        assert [f.name for f in fields(session)] == [
            "session_id", "store", "created_at", "handles",
        ]

    def test_session_lifecycle(self, manager):
        session = manager.create_session()
        assert manager.end_session(session.session_id) is True
        assert session.session_id not in manager.list_active_sessions()
        assert manager.get_session(session.session_id) is None
        assert manager.end_session(session.session_id) is False


class TestGameHandle:
    """Tests for GameHandle."""

    def test_mark_square(self, session):
        handle = session.game(1)
        handle.mark_square(4)
        assert handle.state.current_board[4] == Mark.X
        assert handle.state.turn_is_a is False
        assert session.intents_applied == 1

    def test_handle_matches_reducer(self, session):
        squares = [4, 0, 4, 8, 2, 6, 3]
        handle = session.game(0)
        for square in squares:
            handle.mark_square(square)
        assert handle.state == play(GameState.initial(), squares)

    def test_consecutive_marks_see_latest(self, session):
        """Marks issued back to back never act on a stale game."""
        handle = session.game(0)
        handle.mark_square(0)
        handle.mark_square(0)
        handle.mark_square(1)
        assert handle.state.current_board[:2] == (Mark.X, Mark.O)
        assert handle.state.step_count == 3

    def test_no_marks_after_win(self, session):
        handle = session.game(2)
        for square in X_WINS_SQUARES:
            handle.mark_square(square)
        won = handle.state
        handle.mark_square(8)
        assert handle.state is won
        assert won.winner == Mark.X

    def test_jump_and_fork(self, session):
        handle = session.game(0)
        for square in [0, 1, 2, 3]:
            handle.mark_square(square)
        handle.jump_to_move(1)
        assert handle.state.current_step == 3
        handle.mark_square(4)
        assert handle.state.step_count == 3
        assert handle.state.current_board[4] == Mark.O

    def test_jump_out_of_range(self, session):
        handle = session.game(0)
        with pytest.raises(StepOutOfRange):
            handle.jump_to_step(1)
        with pytest.raises(ValueError):
            handle.jump_to_move(1)
        assert handle.state == GameState.initial()

    def test_submit_intent(self, session):
        handle = session.game(0)
        handle.submit(Intent.mark_square(8))
        handle.submit(Intent.jump_to_step(1))
        assert handle.state.current_step == 1
        assert handle.state.step_count == 2

    def test_square_dispatcher_validates(self, session):
        with pytest.raises(ValueError):
            session.game(0).square_dispatcher(9)

    def test_unknown_game(self, session):
        with pytest.raises(IndexError):
            session.game(3)

    def test_subscribe_sees_root(self, session):
        seen = []
        session.subscribe(seen.append)
        session.game(1).mark_square(0)
        assert len(seen) == 1
        assert seen[0][1].current_board[0] == Mark.X

    def test_jump_to_shown_step_is_not_counted(self, session):
        """Re-selecting the step on screen neither counts nor notifies."""
        handle = session.game(0)
        handle.mark_square(0)
        seen = []
        session.subscribe(seen.append)

        handle.jump_to_step(0)
        assert session.intents_applied == 1
        assert seen == []

        handle.jump_to_step(1)
        handle.jump_to_step(1)
        assert session.intents_applied == 2
        assert len(seen) == 1
