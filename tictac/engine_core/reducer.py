"""
Reducer - Pure game transitions.

The two game-level transitions:
- mark_square: write the mover's mark, fork history if editing the past
- jump_to_step: browse history without discarding anything

Design principles:
- Pure functions: (state, argument) -> new_state
- Illegal moves are absorbed: the input state is returned unchanged
- History is only ever truncated by a mark, never by a jump
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .board import check_square, place
from .state import GameState

if TYPE_CHECKING:
    from .intent import Intent


class StepOutOfRange(ValueError):
    """Raised when jumping to a step that is not in the history."""

    def __init__(self, step: int, step_count: int):
        super().__init__(f"Step {step} outside history of {step_count} snapshots")
        self.step = step
        self.step_count = step_count


def turn_for_step(step_count: int, step: int) -> bool:
    """Whether X moves when the game is shown at step."""
    return (step_count - step) % 2 == 1


def mark_square(state: GameState, square: int) -> GameState:
    """
    Mark a square for the player to move.

    No-op when the shown snapshot already has a winner or the square
    is taken. Marking while viewing an older step drops every snapshot
    newer than it before the new one is prepended.
    """
    check_square(square)
    active = state.current_board
    if state.is_decided or not active[square].is_empty:
        return state

    new_board = place(active, square, state.next_mark)
    surviving = state.history[state.current_step:]
    return GameState(
        history=(new_board,) + surviving,
        turn_is_a=not state.turn_is_a,
        current_step=0,
    )


def jump_to_step(state: GameState, step: int) -> GameState:
    """
    Show the snapshot at step (0 = newest).

    The turn is recomputed from the number of snapshots at or before
    the target step. Jumping to the step already shown returns state
    itself. Raises StepOutOfRange for steps outside history.
    """
    if isinstance(step, bool) or not isinstance(step, int):
        raise StepOutOfRange(step, state.step_count)
    if not 0 <= step < state.step_count:
        raise StepOutOfRange(step, state.step_count)
    turn_is_a = turn_for_step(state.step_count, step)
    if step == state.current_step and turn_is_a == state.turn_is_a:
        return state
    return state._copy_with(current_step=step, turn_is_a=turn_is_a)


def apply_intent(state: GameState, intent: Intent) -> GameState:
    """Apply a user intent directly to a game state."""
    return intent.as_change()(state)
