"""State and error types shared by transitions and machines."""
from __future__ import annotations

from typing import Any

from monster.emitter import Emitter


class InvalidTransition(Exception):
    """Raised when a transition is not registered from the current state."""

    def __init__(
        self,
        message: str = "Transition not valid from current state.",
        state: State | None = None,
        name: str | None = None,
    ) -> None:
        self.message = message
        self.state = state
        self.name = name
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class State:
    """A named node. Emits ``'enter'`` and ``'leave'`` on ``events``.

    The machine's transition table is keyed by ``name``, so two states that
    share a name are the same state as far as any Monster is concerned.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.events = Emitter()

    def enter(self, *args: Any) -> None:
        self.events.emit("enter", *args)

    def leave(self, *args: Any) -> None:
        self.events.emit("leave", *args)

    def __str__(self) -> str:
        return f"State: {self.name}"

    def __repr__(self) -> str:
        return f"State({self.name!r})"


Uninitialized = State("uninitialized")
