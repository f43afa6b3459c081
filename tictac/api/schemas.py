"""
Pydantic Schemas - Render input and intents for display layers.

A display layer needs, per game: each cell's mark, whose turn it is,
whether someone has won, and the list of history steps to navigate to.
It sends back intents: mark a square or jump to a step.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has ended
- INVALID_INTENT: Game index, square or step does not exist
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, model_validator


# =============================================================================
# Enums
# =============================================================================

class IntentKind(str, Enum):
    """Intents a display layer may send."""
    MARK_SQUARE = "mark_square"
    JUMP_TO_STEP = "jump_to_step"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_INTENT = "INVALID_INTENT"


# =============================================================================
# Requests
# =============================================================================

class IntentRequest(BaseModel):
    """A user intent. game_index is omitted for single-game sessions."""
    kind: IntentKind
    game_index: Optional[int] = Field(default=None, ge=0)
    square: Optional[int] = Field(default=None, ge=0, le=8)
    step: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_argument(self):
        if self.kind == IntentKind.MARK_SQUARE and self.square is None:
            raise ValueError("mark_square requires square")
        if self.kind == IntentKind.JUMP_TO_STEP and self.step is None:
            raise ValueError("jump_to_step requires step")
        return self


# =============================================================================
# Views
# =============================================================================

class MoveInfo(BaseModel):
    """One entry of the history navigation list, oldest first."""
    move: int
    step: int
    description: str
    is_current: bool = False


class GameView(BaseModel):
    """Everything needed to draw one game."""
    game_index: int
    squares: list[str] = Field(min_length=9, max_length=9)
    next_player: str
    winner: Optional[str] = None
    is_full: bool = False
    status: str
    current_step: int
    moves: list[MoveInfo] = Field(default_factory=list)


class SessionView(BaseModel):
    """All games of a session."""
    session_id: str
    games: list[GameView] = Field(default_factory=list)
    intents_applied: int = 0


class ErrorResponse(BaseModel):
    """Error details returned instead of a view."""
    error_code: ErrorCode
    message: str
    details: Optional[dict] = None
