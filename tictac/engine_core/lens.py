"""
Lenses and Dispatchers - Addressing a slice of a larger immutable state.

A Lens is a get/put pair:
- get projects a whole state down to one slice
- put rebuilds the whole state from an old whole and a new slice

A Dispatcher is the capability to change some state S held in a store.
Deriving a child dispatcher through a lens gives a component the power
to change its own slice without knowing anything above it:

    root = store.dispatcher()                      # Dispatcher[MultiGameState]
    game = root.focus(game_lens(2))                # Dispatcher[GameState]
    game.dispatch(lambda g: mark_square(g, 4))

Every dispatch carries a function, never a value, so the change is
applied to whatever the store holds at that moment.

Lens laws (required for composition to be safe):
- get(put(s, t)) == t
- put(s, get(s)) == s
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, TypeVar

from .intent import Action

S = TypeVar("S")
T = TypeVar("T")
U = TypeVar("U")

Change = Callable[[S], S]


@dataclass(frozen=True)
class Lens(Generic[S, T]):
    """A get/put pair focusing on a T inside an S."""
    get: Callable[[S], T]
    put: Callable[[S, T], S]

    def modify(self, change: Callable[[T], T]) -> Callable[[S], S]:
        """Lift a change on the slice into a change on the whole."""
        get, put = self.get, self.put

        def lifted(whole: S) -> S:
            return put(whole, change(get(whole)))

        return lifted

    def compose(self, inner: Lens[T, U]) -> Lens[S, U]:
        """Focus further: self then inner."""
        outer = self

        def get(whole: S) -> U:
            return inner.get(outer.get(whole))

        def put(whole: S, value: U) -> S:
            return outer.put(whole, inner.put(outer.get(whole), value))

        return Lens(get=get, put=put)

    def __rshift__(self, inner: Lens[T, U]) -> Lens[S, U]:
        return self.compose(inner)


def identity_lens() -> Lens[S, S]:
    return Lens(get=lambda whole: whole, put=lambda whole, value: value)


def index_lens(index: int) -> Lens[tuple, Any]:
    """
    Focus on one position of a tuple.

    put shares every other element with the old tuple. Negative
    indices are rejected since slicing would misplace them.
    """
    if index < 0:
        raise IndexError(f"Negative index not supported: {index}")

    def get(items: tuple) -> Any:
        return items[index]

    def put(items: tuple, value: Any) -> tuple:
        if items[index] is value:
            return items
        return items[:index] + (value,) + items[index + 1:]

    return Lens(get=get, put=put)


def field_lens(name: str) -> Lens[Any, Any]:
    """Focus on one field of a frozen dataclass."""
    def get(obj: Any) -> Any:
        return getattr(obj, name)

    def put(obj: Any, value: Any) -> Any:
        if getattr(obj, name) is value:
            return obj
        return replace(obj, **{name: value})

    return Lens(get=get, put=put)


def satisfies_lens_laws(lens: Lens[S, T], whole: S, value: T) -> bool:
    """Check get-put and put-get for one whole/value pair."""
    return lens.get(lens.put(whole, value)) == value and lens.put(whole, lens.get(whole)) == whole


class Dispatcher(ABC, Generic[S]):
    """
    Capability to apply a state-change function to an S in a store.

    Subclasses only decide how a change reaches the store; deriving is
    shared.
    """

    @abstractmethod
    def dispatch(self, change: Change[S]) -> None:
        """Apply change to the current S."""
        ...

    def focus(self, lens: Lens[S, T]) -> DerivedDispatcher[S, T]:
        """Dispatcher for the slice lens focuses on."""
        return DerivedDispatcher(parent=self, lens=lens)

    def derive(self, get: Callable[[S], T], put: Callable[[S, T], S]) -> DerivedDispatcher[S, T]:
        return derive_child(self, get, put)

    def restrict(self, when: Callable[[S], bool]) -> GuardedDispatcher[S]:
        """Dispatcher whose changes only apply while when(state) holds."""
        return GuardedDispatcher(parent=self, when=when)


class RootDispatcher(Dispatcher[S]):
    """
    Dispatcher wrapping a store's submission channel.

    Each change is packaged as a single Action and submitted.
    """

    def __init__(self, submit: Callable[[Action], Any], label: str = "root"):
        self._submit = submit
        self.label = label

    def dispatch(self, change: Change[S]) -> None:
        self._submit(Action.of(change, label=getattr(change, "__name__", self.label)))

    def __repr__(self) -> str:
        return f"RootDispatcher({self.label!r})"


class DerivedDispatcher(Dispatcher[T], Generic[S, T]):
    """Dispatcher for a slice T of a parent's S, reached through a lens."""

    def __init__(self, parent: Dispatcher[S], lens: Lens[S, T]):
        self.parent = parent
        self.lens = lens

    def dispatch(self, change: Change[T]) -> None:
        self.parent.dispatch(self.lens.modify(change))

    def __repr__(self) -> str:
        return f"DerivedDispatcher(parent={self.parent!r})"


class GuardedDispatcher(Dispatcher[S]):
    """
    Dispatcher that drops changes while a condition is false.

    The condition is checked against the state the change is applied
    to, not the state at dispatch time.
    """

    def __init__(self, parent: Dispatcher[S], when: Callable[[S], bool]):
        self.parent = parent
        self.when = when

    def dispatch(self, change: Change[S]) -> None:
        when = self.when

        def guarded(state: S) -> S:
            return change(state) if when(state) else state

        self.parent.dispatch(guarded)

    def __repr__(self) -> str:
        return f"GuardedDispatcher(parent={self.parent!r})"


def derive_child(
    parent: Dispatcher[S],
    get: Callable[[S], T],
    put: Callable[[S, T], S],
) -> DerivedDispatcher[S, T]:
    """
    Derive a dispatcher for a child slice of parent's state.

    A change dispatched on the child becomes
    parent_state -> put(parent_state, change(get(parent_state)))
    on the parent.
    """
    return DerivedDispatcher(parent=parent, lens=Lens(get=get, put=put))
