"""
Multi-game root state - A fixed row of independent games.

Each game is reached through game_lens(i); changing one game rebuilds
the tuple but keeps every other GameState object as it was.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

from .lens import Lens, field_lens, index_lens
from .state import INITIAL_GAME, GameState


@dataclass(frozen=True)
class MultiGameState:
    """Ordered, fixed-size collection of games."""
    games: tuple[GameState, ...]

    def __post_init__(self):
        if not self.games:
            raise ValueError("MultiGameState needs at least one game")

    @classmethod
    def create(cls, count: int = 1) -> MultiGameState:
        """count fresh games sharing the initial state value."""
        if count < 1:
            raise ValueError(f"Game count must be at least 1, got {count}")
        return cls(games=(INITIAL_GAME,) * count)

    def __len__(self) -> int:
        return len(self.games)

    def __getitem__(self, index: int) -> GameState:
        return self.games[index]

    def __iter__(self) -> Iterator[GameState]:
        return iter(self.games)

    def with_game(self, index: int, game: GameState) -> MultiGameState:
        """Return new collection with game at index replaced."""
        return game_lens(index).put(self, game)


def game_lens(index: int) -> Lens[MultiGameState, GameState]:
    """Focus the root collection on game index."""
    return field_lens("games") >> index_lens(index)
