"""
API Service - Translation layer between display layers and the engine.

The service:
1. Builds read-only views of a session's games
2. Translates intent requests into game-level changes
3. Reports bad requests as ErrorResponse instead of raising

This layer is framework-agnostic; a terminal, GUI or web front-end can
all sit on top of it.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..engine_core.board import is_full
from ..engine_core.intent import Intent
from ..engine_core.state import GameState
from ..session import Session, SessionManager
from .schemas import (
    ErrorCode,
    ErrorResponse,
    GameView,
    IntentKind,
    IntentRequest,
    MoveInfo,
    SessionView,
)


def status_text(game: GameState) -> str:
    winner = game.winner
    if winner is not None:
        return f"Winner is {winner.value}"
    return f"Next player: {game.next_mark.value}"


def build_moves(game: GameState) -> list[MoveInfo]:
    """Navigation entries, oldest first, each pointing at its history step."""
    moves = []
    for move in range(game.step_count):
        step = game.step_for_move(move)
        moves.append(MoveInfo(
            move=move,
            step=step,
            description=f"Go to move #{move}" if move else "Go to game start",
            is_current=step == game.current_step,
        ))
    return moves


def build_game_view(index: int, game: GameState) -> GameView:
    board = game.current_board
    return GameView(
        game_index=index,
        squares=[cell.value for cell in board],
        next_player=game.next_mark.value,
        winner=game.winner.value if game.winner else None,
        is_full=is_full(board),
        status=status_text(game),
        current_step=game.current_step,
        moves=build_moves(game),
    )


def build_session_view(session: Session) -> SessionView:
    return SessionView(
        session_id=session.session_id,
        games=[build_game_view(i, game) for i, game in enumerate(session.state)],
        intents_applied=session.intents_applied,
    )


def to_intent(request: IntentRequest) -> Intent:
    if request.kind == IntentKind.MARK_SQUARE:
        return Intent.mark_square(request.square)
    return Intent.jump_to_step(request.step)


@dataclass
class APIService:
    """
    Service used by display layers.

    Usage:
        service = APIService()
        view = service.create_session(num_games=2)
        view = service.submit_intent(
            view.session_id,
            IntentRequest(kind="mark_square", game_index=1, square=4),
        )
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_session(self, num_games: int = 1) -> SessionView:
        session = self.session_manager.create_session(num_games)
        return build_session_view(session)

    def get_view(self, session_id: str) -> SessionView | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if session is None:
            return self._session_not_found(session_id)
        return build_session_view(session)

    def submit_intent(self, session_id: str, request: IntentRequest) -> SessionView | ErrorResponse:
        """
        Apply one intent and return the updated view.

        Illegal moves are not errors: the view simply comes back unchanged.
        """
        session = self.session_manager.get_session(session_id)
        if session is None:
            return self._session_not_found(session_id)

        game_index = request.game_index
        if game_index is None:
            if session.num_games != 1:
                return ErrorResponse(
                    error_code=ErrorCode.INVALID_INTENT,
                    message="game_index is required when a session has several games",
                )
            game_index = 0

        try:
            session.game(game_index).submit(to_intent(request))
        except (IndexError, ValueError) as e:
            return ErrorResponse(
                error_code=ErrorCode.INVALID_INTENT,
                message=str(e),
                details={"game_index": game_index, "kind": request.kind.value},
            )
        return build_session_view(session)

    def end_session(self, session_id: str) -> bool | ErrorResponse:
        if not self.session_manager.end_session(session_id):
            return self._session_not_found(session_id)
        return True

    def _session_not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error_code=ErrorCode.SESSION_NOT_FOUND,
            message=f"Session {session_id} not found",
        )
