"""
Session Module - Wires stores and game handles together.

A session represents one sitting of play:
- One authoritative store holding every game
- One handle per game for the display layer
- Ephemeral: nothing survives the process
"""

from .handle import GameHandle
from .manager import SessionManager, Session

__all__ = [
    "GameHandle",
    "SessionManager",
    "Session",
]
