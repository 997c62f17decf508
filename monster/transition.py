"""Transition - a named edge from one or more states to a target."""
from __future__ import annotations

from typing import Any, Iterable, Union

from monster.emitter import Emitter
from monster.types import State, Uninitialized

Sources = Union[State, Iterable[State], None]


def _normalize_sources(from_: Sources) -> list[State]:
    if from_ is None:
        return [Uninitialized]
    if isinstance(from_, State):
        return [from_]
    sources = list(from_)
    return sources or [Uninitialized]


class Transition:
    """Named edge with a list of source states and a single target.

    ``from_`` accepts a State, a sequence of States, or nothing, in which
    case the edge starts from ``Uninitialized``.  ``to`` may be omitted; a
    Monster then never moves along this edge.
    """

    def __init__(
        self,
        name: str,
        from_: Sources = None,
        to: State | None = None,
    ) -> None:
        self.name = name
        self.from_: list[State] = _normalize_sources(from_)
        self.to = to
        self.events = Emitter()

    def transition(self, from_state: State, to_state: State, *args: Any) -> None:
        """Leave ``from_state``, emit ``'transition'``, enter ``to_state``.

        Runs unconditionally; whether the hop is legal is a Monster concern.
        """
        from_state.leave(*args)
        self.events.emit("transition", from_state, to_state, *args)
        to_state.enter(*args)

    def __str__(self) -> str:
        return f"Transition: {self.name}"

    def __repr__(self) -> str:
        sources = ", ".join(s.name for s in self.from_)
        target = self.to.name if self.to is not None else None
        return f"Transition({self.name!r}, [{sources}] -> {target!r})"
