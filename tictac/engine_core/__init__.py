"""
Engine Core - Immutable game state, transitions and dispatch.

The engine is the part that:
1. Detects wins on a 3x3 board
2. Holds each game as an immutable value with its history
3. Applies mark/jump transitions as pure functions
4. Threads changes from a narrow slice up to one authoritative store
"""

from .board import Mark, Board, EMPTY_BOARD, WIN_LINES, evaluate, is_full, make_board, place
from .state import GameState, INITIAL_GAME
from .reducer import StepOutOfRange, mark_square, jump_to_step, apply_intent
from .intent import Intent, IntentType, Action
from .lens import (
    Lens,
    Dispatcher,
    RootDispatcher,
    DerivedDispatcher,
    GuardedDispatcher,
    derive_child,
    identity_lens,
    index_lens,
    field_lens,
)
from .slices import BoardSlice, SquareSlot, board_lens, square_lens, claim, is_undecided
from .store import Store
from .multi_game import MultiGameState, game_lens

__all__ = [
    "Mark",
    "Board",
    "EMPTY_BOARD",
    "WIN_LINES",
    "evaluate",
    "is_full",
    "make_board",
    "place",
    "GameState",
    "INITIAL_GAME",
    "StepOutOfRange",
    "mark_square",
    "jump_to_step",
    "apply_intent",
    "Intent",
    "IntentType",
    "Action",
    "Lens",
    "Dispatcher",
    "RootDispatcher",
    "DerivedDispatcher",
    "GuardedDispatcher",
    "derive_child",
    "identity_lens",
    "index_lens",
    "field_lens",
    "BoardSlice",
    "SquareSlot",
    "board_lens",
    "square_lens",
    "claim",
    "is_undecided",
    "Store",
    "MultiGameState",
    "game_lens",
]
