"""
Game State - Immutable value for one game and its history.

Design principles:
- Immutable: frozen dataclass, every transition returns a new state
- Newest-first history: history[0] is the latest snapshot
- Validated: a GameState that exists satisfies its invariants
- Derived, not stored: winner and next mark are computed from the snapshot
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace

from .board import BOARD_SIZE, EMPTY_BOARD, Board, Mark, evaluate


@dataclass(frozen=True)
class GameState:
    """
    One game at a point in time.

    history holds every recorded snapshot, newest first, ending with the
    empty board. current_step selects the snapshot being shown; it is 0
    unless the player has jumped back in time.
    """
    history: tuple[Board, ...] = field(default_factory=lambda: (EMPTY_BOARD,))
    turn_is_a: bool = True
    current_step: int = 0

    def __post_init__(self):
        if not self.history:
            raise ValueError("History must hold at least the empty board")
        for board in self.history:
            if len(board) != BOARD_SIZE:
                raise ValueError(f"Snapshot has {len(board)} cells, expected {BOARD_SIZE}")
        if not 0 <= self.current_step < len(self.history):
            raise ValueError(
                f"current_step {self.current_step} outside history of {len(self.history)}"
            )

    @classmethod
    def initial(cls) -> GameState:
        """Fresh game: empty board, X to move."""
        return cls()

    @property
    def current_board(self) -> Board:
        """The snapshot selected by current_step."""
        return self.history[self.current_step]

    @property
    def winner(self) -> Mark | None:
        return evaluate(self.current_board)

    @property
    def is_decided(self) -> bool:
        return self.winner is not None

    @property
    def next_mark(self) -> Mark:
        """Mark the next accepted move will write."""
        return Mark.X if self.turn_is_a else Mark.O

    @property
    def step_count(self) -> int:
        return len(self.history)

    def step_for_move(self, move: int) -> int:
        """
        Convert a move number to a history step.

        Moves count oldest-first (0 is the game start), steps count
        newest-first. Raises ValueError for moves not in the history.
        """
        if not 0 <= move < len(self.history):
            raise ValueError(f"Move {move} not in history of {len(self.history)}")
        return len(self.history) - 1 - move

    def move_for_step(self, step: int) -> int:
        """Inverse of step_for_move."""
        if not 0 <= step < len(self.history):
            raise ValueError(f"Step {step} not in history of {len(self.history)}")
        return len(self.history) - 1 - step

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)


INITIAL_GAME = GameState.initial()
