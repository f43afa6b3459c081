"""
Board - Marks, 3x3 boards and win detection.

Board representation: tuple[Mark, ...] of length 9, row-major.
  0 | 1 | 2
  3 | 4 | 5
  6 | 7 | 8

Boards are plain tuples so snapshots are immutable and compare by value.
"""

from __future__ import annotations
from enum import Enum
from typing import Iterable


class Mark(str, Enum):
    """Cell values. X always moves first."""
    EMPTY = ""
    X = "X"
    O = "O"

    @property
    def is_empty(self) -> bool:
        return self is Mark.EMPTY


Board = tuple[Mark, ...]

BOARD_SIZE = 9

EMPTY_BOARD: Board = (Mark.EMPTY,) * BOARD_SIZE

# Checked in this order; the first complete line decides the winner.
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


def make_board(cells: Iterable[Mark | str]) -> Board:
    """
    Build a board from marks or their string values.

    Accepts "X", "O" and "" (or Mark members). Raises ValueError
    unless exactly nine valid cells are given.
    """
    board = tuple(Mark(c) for c in cells)
    if len(board) != BOARD_SIZE:
        raise ValueError(f"Board needs {BOARD_SIZE} cells, got {len(board)}")
    return board


def check_square(index: int) -> int:
    """Return index if it addresses a cell, else raise ValueError."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValueError(f"Square index must be an int, got {index!r}")
    if not 0 <= index < BOARD_SIZE:
        raise ValueError(f"Square index out of range: {index}")
    return index


def place(board: Board, index: int, mark: Mark) -> Board:
    """
    Return a new board with mark written at index.

    Cells are write-once: placing on a filled cell raises ValueError.
    """
    check_square(index)
    if mark.is_empty:
        raise ValueError("Cannot place an empty mark")
    if not board[index].is_empty:
        raise ValueError(f"Square {index} is already taken by {board[index].value}")
    return board[:index] + (mark,) + board[index + 1:]


def evaluate(board: Board) -> Mark | None:
    """
    Return the winning mark, or None.

    A full board with no complete line also returns None; callers that
    need to tell a draw apart use is_full().
    """
    for a, b, c in WIN_LINES:
        if not board[a].is_empty and board[a] == board[b] == board[c]:
            return board[a]
    return None


def is_full(board: Board) -> bool:
    return all(not cell.is_empty for cell in board)


def render_rows(board: Board, blank: str = ".") -> list[str]:
    """Text rows for terminal display, e.g. ['X.O', '.X.', '..O']."""
    cells = [cell.value or blank for cell in board]
    return ["".join(cells[row * 3:row * 3 + 3]) for row in range(3)]
