"""Monster - the state machine instance callers drive."""
from __future__ import annotations

import logging
from typing import Any, Callable

from monster.emitter import Emitter
from monster.transition import Transition
from monster.types import InvalidTransition, State, Uninitialized

logger = logging.getLogger(__name__)


class Monster:
    """Holds the current state and a name-keyed transition table.

    Emits on ``events``: ``'transition'`` with ``(old, new)``, then the
    transition's own name with the caller's extra arguments, then
    ``'final'`` when the new state has no outgoing transitions.

    Every added transition also becomes a shortcut: after
    ``add_transition(Transition("go", a, b))``, ``monster.go()`` is the same
    as ``monster.transition("go")``.  Shortcuts never hide real attributes.
    """

    def __init__(self, initial: State | None = None, *enter_args: Any) -> None:
        self.state: State = initial or Uninitialized
        self.events = Emitter()
        self._states: dict[str, dict[str, State]] = {}
        self._shortcuts: dict[str, Callable[..., Monster]] = {}
        self.state.enter(*enter_args)

    def __getattr__(self, name: str) -> Callable[..., Monster]:
        # Only reached when normal lookup fails.
        shortcuts = self.__dict__.get("_shortcuts")
        if shortcuts is not None and name in shortcuts:
            return shortcuts[name]
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    def add_transition(self, trans: Transition) -> Monster:
        """Register ``trans`` from each of its sources. Last one wins."""
        for source in trans.from_:
            edges = self._states.setdefault(source.name, {})
            if trans.to is not None:
                edges[trans.name] = trans.to
            else:
                # Source stops being final but the name never matches.
                edges.pop(trans.name, None)
        logger.debug(
            "Registered %s from %s",
            trans,
            ", ".join(s.name for s in trans.from_),
        )

        if trans.name in self.__dict__ or hasattr(type(self), trans.name):
            logger.debug(
                "Shortcut %r shadowed by an attribute; use transition(%r)",
                trans.name,
                trans.name,
            )

        def shortcut(*args: Any) -> Monster:
            return self.transition(trans.name, *args)

        shortcut.__name__ = trans.name
        self._shortcuts[trans.name] = shortcut
        return self

    def is_final(self) -> bool:
        return self.state.name not in self._states

    def can(self, name: str) -> bool:
        """Return True if ``transition(name)`` would succeed right now."""
        return name in self._states.get(self.state.name, {})

    def allowed(self) -> list[str]:
        """Transition names registered from the current state."""
        return list(self._states.get(self.state.name, {}))

    def transition(self, name: str, *args: Any) -> Monster:
        """Move along ``name`` from the current state.

        Raises ``InvalidTransition`` without touching ``state`` when the
        current state is final or has no transition called ``name``.  State
        enter/leave hooks are not invoked; see ``Transition.transition``.
        """
        cur = self.state
        if self.is_final() or name not in self._states[cur.name]:
            logger.debug("Rejected %r from %s", name, cur)
            raise InvalidTransition(state=cur, name=name)
        self.state = self._states[cur.name][name]
        logger.debug("%s -> %s via %r", cur, self.state, name)
        self.events.emit("transition", cur, self.state)
        self.events.emit(name, *args)
        if self.is_final():
            self.events.emit("final")
        return self
