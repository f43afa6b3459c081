"""
Session Manager - Creates and tracks in-memory game sessions.

LIFECYCLE:
1. Display layer asks for a session with N games
2. One Store is created, seeded with N empty games
3. Each game gets a GameHandle derived from the store's root dispatcher
4. Intents flow through handles; the store republishes the new root
5. Session ends -> it is forgotten, nothing is persisted
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable
import logging
import time
import uuid

from ..engine_core.multi_game import MultiGameState
from ..engine_core.store import Store
from .handle import GameHandle

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    One store and the handles for its games.

    The store is the only place the state lives; handles only read from
    it and dispatch into it.
    """
    session_id: str
    store: Store[MultiGameState]
    created_at: float
    handles: list[GameHandle] = field(default_factory=list)

    @classmethod
    def create(cls, num_games: int = 1, session_id: str | None = None) -> Session:
        store = Store(MultiGameState.create(num_games))
        root = store.dispatcher()
        read = lambda: store.state  # noqa: E731
        session = cls(
            session_id=session_id or str(uuid.uuid4())[:8],
            store=store,
            created_at=time.time(),
        )
        session.handles = [GameHandle(i, read, root) for i in range(num_games)]
        return session

    @property
    def state(self) -> MultiGameState:
        return self.store.state

    @property
    def num_games(self) -> int:
        return len(self.handles)

    @property
    def intents_applied(self) -> int:
        """Number of accepted changes that produced a new root."""
        return self.store.version

    def game(self, index: int) -> GameHandle:
        """Get the handle for a game. Raises IndexError for unknown indices."""
        if not 0 <= index < len(self.handles):
            raise IndexError(f"Session {self.session_id} has no game {index}")
        return self.handles[index]

    def subscribe(self, listener: Callable[[MultiGameState], None]) -> Callable[[], None]:
        return self.store.subscribe(listener)


class SessionManager:
    """
    Manages game sessions.

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(self, num_games: int = 1) -> Session:
        session = Session.create(num_games)
        self._sessions[session.session_id] = session
        logger.debug("Created session %s with %d game(s)", session.session_id, num_games)
        return session

    def get_session(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """Forget a session. Returns False if it did not exist."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        logger.debug(
            "Ended session %s after %d change(s)", session_id, session.intents_applied
        )
        return True

    def list_active_sessions(self) -> list[str]:
        return list(self._sessions.keys())
