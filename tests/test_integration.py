"""Integration tests driving complete machines."""
from __future__ import annotations

import pytest

from monster import InvalidTransition, Monster, State, Transition


class TestMonsterIntegration:
    def test_two_state_scenario(self):
        """a --go--> b, with b final."""
        s1, s2 = State("a"), State("b")
        t = Transition("go", s1, s2)
        m = Monster(s1)
        m.add_transition(t)

        assert m.is_final() is False
        m.go()
        assert m.state is s2
        assert m.is_final() is True

    def test_door_lifecycle(self):
        """Walk a door through open/close/lock cycles until it is broken."""
        closed, opened, locked, broken = (
            State("closed"), State("opened"), State("locked"), State("broken"),
        )
        door = Monster(closed)
        door.add_transition(Transition("open", closed, opened))
        door.add_transition(Transition("close", opened, closed))
        door.add_transition(Transition("lock", closed, locked))
        door.add_transition(Transition("unlock", locked, closed))
        door.add_transition(Transition("smash", [closed, opened, locked], broken))

        history = []
        door.events.on("transition", lambda old, new: history.append((old.name, new.name)))
        finals = []
        door.events.on("final", lambda: finals.append(door.state.name))

        door.open().close().lock()
        with pytest.raises(InvalidTransition):
            door.open()
        assert door.state is locked

        door.unlock().smash()

        assert history == [
            ("closed", "opened"),
            ("opened", "closed"),
            ("closed", "locked"),
            ("locked", "closed"),
            ("closed", "broken"),
        ]
        assert finals == ["broken"]
        assert door.is_final() is True

    def test_shared_states_notify_every_monster_user(self):
        """Listeners live on the State, so they are shared across machines."""
        idle, busy = State("idle"), State("busy")
        start = Transition("start", idle, busy)
        entered = []
        busy.events.on("enter", lambda *args: entered.append(args))

        first = Monster(idle).add_transition(start)
        second = Monster(idle).add_transition(start)

        # Monster moves leave State hooks alone; the hop is driven explicitly.
        for m, tag in ((first, "first"), (second, "second")):
            old = m.state
            m.start()
            start.transition(old, m.state, tag)

        assert entered == [("first",), ("second",)]

    def test_bridging_monster_events_to_state_hooks(self):
        """A caller can wire Monster moves into Transition hops."""
        a, b = State("a"), State("b")
        t = Transition("go", a, b)
        m = Monster(a).add_transition(t)
        log = []
        a.events.on("leave", lambda *args: log.append(("leave", args)))
        b.events.on("enter", lambda *args: log.append(("enter", args)))
        m.events.on("transition", lambda old, new: t.transition(old, new, "bridged"))

        m.go()

        assert log == [("leave", ("bridged",)), ("enter", ("bridged",))]

    def test_payload_reaches_monster_and_initial_enter(self):
        start, done = State("start"), State("done")
        enters = []
        start.events.on("enter", lambda *args: enters.append(args))

        m = Monster(start, {"job": 1})
        m.add_transition(Transition("finish", start, done))
        results = []
        m.events.on("finish", lambda result: results.append(result))

        m.finish({"ok": True})

        assert enters == [({"job": 1},)]
        assert results == [{"ok": True}]
