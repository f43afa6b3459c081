"""
Store - The single authoritative holder of a state tree.

The store is the only writer. It knows nothing about games: its one rule
is that an accepted Action's change function, applied to the current
state, gives the new state. Everyone else holds a Dispatcher (to change
state) or reads store.state (a read-only immutable value).

Dispatches made while subscribers are being notified are queued and run
in order once the current one finishes, each against the latest state.
"""

from __future__ import annotations
from collections import deque
from typing import Callable, Generic, TypeVar
import logging

from .intent import Action
from .lens import RootDispatcher

logger = logging.getLogger(__name__)

S = TypeVar("S")

Listener = Callable[[S], None]


class Store(Generic[S]):
    """
    Holds the current state and applies actions one at a time.

    Usage:
        store = Store(MultiGameState.create(3))
        root = store.dispatcher()
        root.dispatch(some_change)
        store.state  # new immutable root
    """

    def __init__(self, initial_state: S):
        self._state = initial_state
        self._listeners: list[Listener] = []
        self._pending: deque[Action] = deque()
        self._applying = False
        self.version = 0

    @property
    def state(self) -> S:
        return self._state

    def apply(self, action: Action) -> S:
        """
        Apply an action and return the resulting state.

        If called from inside a listener the action is queued and the
        current state is returned; it is applied before the outer call
        returns. A change that raises leaves the state as it was and
        discards anything still queued.
        """
        self._pending.append(action)
        if self._applying:
            return self._state

        self._applying = True
        try:
            while self._pending:
                self._apply_one(self._pending.popleft())
        except Exception:
            dropped = len(self._pending)
            self._pending.clear()
            if dropped:
                logger.debug("Dropped %d queued action(s) after a failed change", dropped)
            raise
        finally:
            self._applying = False
        return self._state

    def _apply_one(self, action: Action) -> None:
        old_state = self._state
        new_state = action.change(old_state)
        if new_state is old_state:
            logger.debug("Action %s left state unchanged", action.label)
            return

        self._state = new_state
        self.version += 1
        logger.debug("Applied action %s (version %d)", action.label, self.version)
        for listener in list(self._listeners):
            listener(new_state)

    def dispatcher(self) -> RootDispatcher[S]:
        """Root dispatcher submitting into this store."""
        return RootDispatcher(self.apply, label=type(self._state).__name__)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call listener with every new state.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
