"""Synchronous event emitter keyed by event name."""
from __future__ import annotations

from typing import Any, Callable

Listener = Callable[..., Any]


class _Once:
    """Wraps a listener so it unregisters itself before its first call."""

    __slots__ = ("emitter", "event", "listener")

    def __init__(self, emitter: Emitter, event: str, listener: Listener) -> None:
        self.emitter = emitter
        self.event = event
        self.listener = listener

    def __call__(self, *args: Any) -> Any:
        self.emitter.off(self.event, self)
        return self.listener(*args)


class Emitter:
    """Maps event names to ordered listener lists.

    Listeners run inline, in registration order, before ``emit`` returns.
    Exceptions raised by a listener are not caught.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def on(self, event: str, listener: Listener) -> None:
        self._listeners.setdefault(event, []).append(listener)

    def once(self, event: str, listener: Listener) -> None:
        self.on(event, _Once(self, event, listener))

    def off(self, event: str, listener: Listener) -> None:
        """Remove the first registration of ``listener``. No-op if absent."""
        registered = self._listeners.get(event)
        if not registered:
            return
        for i, fn in enumerate(registered):
            if fn == listener or (isinstance(fn, _Once) and fn.listener == listener):
                del registered[i]
                break
        if not registered:
            del self._listeners[event]

    def emit(self, event: str, *args: Any) -> bool:
        """Call every listener for ``event``. Returns True if any ran."""
        registered = self._listeners.get(event)
        if not registered:
            return False
        # Snapshot: changes made by listeners apply to the next emit.
        for fn in list(registered):
            fn(*args)
        return True

    def listeners(self, event: str) -> list[Listener]:
        return [
            fn.listener if isinstance(fn, _Once) else fn
            for fn in self._listeners.get(event, ())
        ]

    def clear(self, event: str | None = None) -> None:
        if event is None:
            self._listeners.clear()
        else:
            self._listeners.pop(event, None)
