"""
API Module - Views and intents for display layers.

Display layers (terminal, GUI, web) are outside the engine. They read
GameView/SessionView models and send IntentRequest models through
APIService.
"""

from .schemas import (
    IntentKind,
    ErrorCode,
    IntentRequest,
    MoveInfo,
    GameView,
    SessionView,
    ErrorResponse,
)
from .service import APIService, build_game_view, build_session_view, status_text

__all__ = [
    "IntentKind",
    "ErrorCode",
    "IntentRequest",
    "MoveInfo",
    "GameView",
    "SessionView",
    "ErrorResponse",
    "APIService",
    "build_game_view",
    "build_session_view",
    "status_text",
]
