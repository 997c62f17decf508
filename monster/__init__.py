"""monster - A minimal finite state machine with observable events."""
from __future__ import annotations

from monster.emitter import Emitter
from monster.machine import Monster
from monster.transition import Transition
from monster.types import InvalidTransition, State, Uninitialized

__all__ = [
    "Emitter",
    "InvalidTransition",
    "Monster",
    "State",
    "Transition",
    "Uninitialized",
]
