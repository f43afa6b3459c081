"""
Pytest fixtures for Tictac tests.
"""

import pytest

from ..engine_core.board import make_board
from ..engine_core.reducer import mark_square
from ..engine_core.state import GameState
from ..engine_core.store import Store
from ..engine_core.multi_game import MultiGameState
from ..session import Session, SessionManager

# A full game with no winner: X O X / X O O / O X X
DRAW_SQUARES = [0, 1, 2, 4, 3, 5, 7, 6, 8]

# X completes the top row on its third move
X_WINS_SQUARES = [0, 3, 1, 4, 2]


def play(state: GameState, squares) -> GameState:
    for square in squares:
        state = mark_square(state, square)
    return state


@pytest.fixture
def fresh_game() -> GameState:
    return GameState.initial()


@pytest.fixture
def four_move_game(fresh_game: GameState) -> GameState:
    """X0 O1 X2 O3, shown at the newest step."""
    return play(fresh_game, [0, 1, 2, 3])


@pytest.fixture
def won_game(fresh_game: GameState) -> GameState:
    return play(fresh_game, X_WINS_SQUARES)


@pytest.fixture
def drawn_board():
    return make_board(["X", "O", "X", "X", "O", "O", "O", "X", "X"])


@pytest.fixture
def multi_store() -> Store:
    return Store(MultiGameState.create(3))


@pytest.fixture
def session() -> Session:
    return Session.create(num_games=3, session_id="test_session")


@pytest.fixture
def manager() -> SessionManager:
    return SessionManager()
