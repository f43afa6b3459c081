"""
Tests for the API service and schemas.

Validates that:
- Views carry squares, turn, winner and the move list
- Intent requests are validated
- Errors come back as ErrorResponse with the right code
"""

import pytest
from pydantic import ValidationError

from ..api import (
    APIService,
    ErrorCode,
    ErrorResponse,
    IntentKind,
    IntentRequest,
    SessionView,
    build_game_view,
    status_text,
)
from ..engine_core.reducer import jump_to_step
from .conftest import DRAW_SQUARES, play


def mark(square, game_index=None):
    return IntentRequest(kind=IntentKind.MARK_SQUARE, game_index=game_index, square=square)


def jump(step, game_index=None):
    return IntentRequest(kind=IntentKind.JUMP_TO_STEP, game_index=game_index, step=step)


class TestViews:
    """Tests for view building."""

    def test_initial_view(self, fresh_game):
        view = build_game_view(0, fresh_game)
        assert view.squares == [""] * 9
        assert view.next_player == "X"
        assert view.winner is None
        assert view.status == "Next player: X"
        assert [m.description for m in view.moves] == ["Go to game start"]

    def test_move_list_oldest_first(self, four_move_game):
        view = build_game_view(0, four_move_game)
        assert [m.description for m in view.moves] == [
            "Go to game start",
            "Go to move #1",
            "Go to move #2",
            "Go to move #3",
            "Go to move #4",
        ]
        assert [m.step for m in view.moves] == [4, 3, 2, 1, 0]
        assert [m.is_current for m in view.moves] == [False, False, False, False, True]

    def test_winner_status(self, won_game):
        view = build_game_view(0, won_game)
        assert view.winner == "X"
        assert view.status == "Winner is X"

    def test_draw_shows_next_player(self, fresh_game):
        """The engine does not report draws; the view exposes is_full instead."""
        view = build_game_view(0, play(fresh_game, DRAW_SQUARES))
        assert view.winner is None
        assert view.is_full is True
        assert status_text(play(fresh_game, DRAW_SQUARES)) == "Next player: O"

    def test_view_after_jump(self, four_move_game):
        view = build_game_view(0, jump_to_step(four_move_game, 3))
        assert view.squares == ["X", "", "", "", "", "", "", "", ""]
        assert view.next_player == "O"
        assert view.current_step == 3

    def test_view_serializes(self, fresh_game):
        data = build_game_view(2, fresh_game).model_dump()
        assert data["game_index"] == 2
        assert data["moves"][0]["step"] == 0


class TestIntentRequest:
    """Tests for IntentRequest validation."""

    def test_square_range(self):
        with pytest.raises(ValidationError):
            mark(9)
        with pytest.raises(ValidationError):
            mark(-1)

    def test_kind_needs_argument(self):
        with pytest.raises(ValidationError):
            IntentRequest(kind="mark_square")
        with pytest.raises(ValidationError):
            IntentRequest(kind="jump_to_step", square=3)

    def test_kind_from_string(self):
        assert IntentRequest(kind="jump_to_step", step=0).kind == IntentKind.JUMP_TO_STEP


class TestAPIService:
    """Tests for APIService."""

    def test_single_game_flow(self):
        service = APIService()
        view = service.create_session()
        session_id = view.session_id

        for square in [0, 1, 2, 3]:
            view = service.submit_intent(session_id, mark(square))
        view = service.submit_intent(session_id, jump(3))
        view = service.submit_intent(session_id, mark(4))

        assert isinstance(view, SessionView)
        game = view.games[0]
        assert len(game.moves) == 3
        assert game.squares[4] == "O"
        assert view.intents_applied == 6

    def test_illegal_move_is_not_an_error(self):
        service = APIService()
        session_id = service.create_session().session_id
        service.submit_intent(session_id, mark(0))
        view = service.submit_intent(session_id, mark(0))
        assert isinstance(view, SessionView)
        assert view.intents_applied == 1

    def test_multi_game_requires_index(self):
        service = APIService()
        session_id = service.create_session(num_games=2).session_id
        result = service.submit_intent(session_id, mark(0))
        assert isinstance(result, ErrorResponse)
        assert result.error_code == ErrorCode.INVALID_INTENT

    def test_multi_game_isolation(self):
        service = APIService()
        session_id = service.create_session(num_games=2).session_id
        view = service.submit_intent(session_id, mark(4, game_index=1))
        assert view.games[1].squares[4] == "X"
        assert view.games[0].squares == [""] * 9

    def test_bad_game_index(self):
        service = APIService()
        session_id = service.create_session(num_games=2).session_id
        result = service.submit_intent(session_id, mark(4, game_index=5))
        assert isinstance(result, ErrorResponse)
        assert result.error_code == ErrorCode.INVALID_INTENT

    def test_bad_step(self):
        service = APIService()
        session_id = service.create_session().session_id
        result = service.submit_intent(session_id, jump(3))
        assert isinstance(result, ErrorResponse)
        assert result.error_code == ErrorCode.INVALID_INTENT
        assert result.details == {"game_index": 0, "kind": "jump_to_step"}

    def test_unknown_session(self):
        service = APIService()
        for result in (
            service.get_view("missing"),
            service.submit_intent("missing", mark(0)),
            service.end_session("missing"),
        ):
            assert isinstance(result, ErrorResponse)
            assert result.error_code == ErrorCode.SESSION_NOT_FOUND

    def test_end_session(self):
        service = APIService()
        session_id = service.create_session().session_id
        assert service.end_session(session_id) is True
        assert isinstance(service.get_view(session_id), ErrorResponse)
