"""
Board and square slices of a game.

A square component only needs its own cell and whose turn it is. These
lenses narrow a GameState down to that, so the square can dispatch the
per-square delta (claim) without knowing about history:

    game -> restrict(is_undecided) -> board_lens -> square_lens(i) -> claim

The chain above behaves exactly like reducer.mark_square(game, i).
"""

from __future__ import annotations
from dataclasses import dataclass

from .board import Board, Mark, check_square
from .lens import Lens
from .state import GameState


@dataclass(frozen=True)
class BoardSlice:
    """The shown snapshot and the turn; what a board component sees."""
    squares: Board
    turn_is_a: bool


@dataclass(frozen=True)
class SquareSlot:
    """One cell and the turn; what a square component sees."""
    mark: Mark
    turn_is_a: bool


def _get_board(game: GameState) -> BoardSlice:
    return BoardSlice(squares=game.current_board, turn_is_a=game.turn_is_a)


def _put_board(game: GameState, board: BoardSlice) -> GameState:
    # Writing back what is already shown is not a move.
    if board == _get_board(game):
        return game
    return GameState(
        history=(board.squares,) + game.history[game.current_step:],
        turn_is_a=board.turn_is_a,
        current_step=0,
    )


board_lens: Lens[GameState, BoardSlice] = Lens(get=_get_board, put=_put_board)


def square_lens(index: int) -> Lens[BoardSlice, SquareSlot]:
    """Focus a board slice on one square."""
    check_square(index)

    def get(board: BoardSlice) -> SquareSlot:
        return SquareSlot(mark=board.squares[index], turn_is_a=board.turn_is_a)

    def put(board: BoardSlice, slot: SquareSlot) -> BoardSlice:
        squares = board.squares[:index] + (slot.mark,) + board.squares[index + 1:]
        return BoardSlice(squares=squares, turn_is_a=slot.turn_is_a)

    return Lens(get=get, put=put)


def claim(slot: SquareSlot) -> SquareSlot:
    """Per-square move: an empty square takes the mover's mark and the turn passes."""
    if not slot.mark.is_empty:
        return slot
    mark = Mark.X if slot.turn_is_a else Mark.O
    return SquareSlot(mark=mark, turn_is_a=not slot.turn_is_a)


def is_undecided(game: GameState) -> bool:
    return not game.is_decided
