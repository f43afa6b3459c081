"""
Intents and Actions.

Intents are what the display layer sends:
1. Mark a square
2. Jump to a history step

Before an intent reaches a store it is turned into a plain state-change
function. The store only ever receives Actions, and an Action carries
that function; the store applies it without looking inside.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Any, Callable
import time

from .board import check_square
from .reducer import jump_to_step, mark_square
from .state import GameState


class IntentType(Enum):
    """User intents accepted by a game."""
    MARK_SQUARE = "mark_square"
    JUMP_TO_STEP = "jump_to_step"


@dataclass(frozen=True)
class Intent:
    """
    A user request against one game.

    Use the factories; they check the argument shape. Whether a step
    exists in the history is only known when the change is applied.
    """
    intent_type: IntentType
    square: int | None = None
    step: int | None = None

    @classmethod
    def mark_square(cls, square: int) -> Intent:
        """Factory for marking a square (0-8)."""
        return cls(intent_type=IntentType.MARK_SQUARE, square=check_square(square))

    @classmethod
    def jump_to_step(cls, step: int) -> Intent:
        """Factory for jumping to a history step (0 = newest)."""
        if isinstance(step, bool) or not isinstance(step, int) or step < 0:
            raise ValueError(f"Step must be a non-negative int, got {step!r}")
        return cls(intent_type=IntentType.JUMP_TO_STEP, step=step)

    def as_change(self) -> Callable[[GameState], GameState]:
        """The pure game-level transition this intent stands for."""
        if self.intent_type is IntentType.MARK_SQUARE:
            return partial(mark_square, square=self.square)
        return partial(jump_to_step, step=self.step)

    def describe(self) -> str:
        if self.intent_type is IntentType.MARK_SQUARE:
            return f"mark square {self.square}"
        return f"jump to step {self.step}"


@dataclass(frozen=True)
class Action:
    """
    Store payload: a state-change function plus a label for logs.

    The store's only rule is new_state = action.change(state).
    """
    change: Callable[[Any], Any]
    label: str = "change"
    timestamp: float = field(default_factory=time.time)

    @classmethod
    def of(cls, change: Callable[[Any], Any], label: str | None = None) -> Action:
        return cls(change=change, label=label or getattr(change, "__name__", "change"))
