"""
Game Handle - What a display component for one game is given.

A handle can read its own game and dispatch changes to it. It cannot see
or touch sibling games: everything it does goes through a dispatcher
derived for its index.
"""

from __future__ import annotations
from typing import Callable

from ..engine_core.board import check_square
from ..engine_core.intent import Intent
from ..engine_core.lens import Dispatcher, Lens
from ..engine_core.multi_game import MultiGameState, game_lens
from ..engine_core.reducer import jump_to_step
from ..engine_core.slices import BoardSlice, SquareSlot, board_lens, claim, is_undecided, square_lens
from ..engine_core.state import GameState


class GameHandle:
    """
    Read/dispatch capability for one game in a MultiGameState.

    Usage:
        handle = GameHandle(0, lambda: store.state, store.dispatcher())
        handle.mark_square(4)
        handle.jump_to_move(0)
        handle.state.current_board
    """

    def __init__(
        self,
        index: int,
        read: Callable[[], MultiGameState],
        root: Dispatcher[MultiGameState],
    ):
        self.index = index
        self._lens: Lens[MultiGameState, GameState] = game_lens(index)
        self._read = read
        self.dispatcher: Dispatcher[GameState] = root.focus(self._lens)

    @property
    def state(self) -> GameState:
        return self._lens.get(self._read())

    def board_dispatcher(self) -> Dispatcher[BoardSlice]:
        """Board-level dispatcher; its changes are dropped once the game is won."""
        return self.dispatcher.restrict(is_undecided).focus(board_lens)

    def square_dispatcher(self, square: int) -> Dispatcher[SquareSlot]:
        return self.board_dispatcher().focus(square_lens(check_square(square)))

    def mark_square(self, square: int) -> None:
        """Mark a square for the player to move; illegal marks are ignored."""
        self.square_dispatcher(square).dispatch(claim)

    def jump_to_step(self, step: int) -> None:
        self.dispatcher.dispatch(lambda game: jump_to_step(game, step))

    def jump_to_move(self, move: int) -> None:
        """Jump using the oldest-first move number shown in move lists."""
        self.jump_to_step(self.state.step_for_move(move))

    def submit(self, intent: Intent) -> None:
        """Dispatch a display-layer intent as a game-level change."""
        self.dispatcher.dispatch(intent.as_change())

    def __repr__(self) -> str:
        return f"GameHandle(index={self.index})"
