"""Tests for the Action Engine."""

import logging
import threading

import pytest

from room_kernel.execution.engine import ActionEngine, ActionFailed, apply
from room_kernel.models.action import Action
from room_kernel.models.config import EngineConfig
from room_kernel.models.property import (
    HE,
    I,
    IT,
    SHE,
    THAT,
    Adjective,
    adjective,
    all_of,
    called,
    did_to,
    has,
    of_type,
    on,
    was_by,
)
from room_kernel.models.verb import Verb
from room_kernel.room.store import RoomStore

OPEN = adjective(Adjective.OPEN)
CLOSED = adjective(Adjective.CLOSED)
LOCKED = adjective(Adjective.LOCKED)


def _make_action(**overrides) -> Action:
    fields = dict(subject=HE, verb=Verb.OPEN, target=IT)
    fields.update(overrides)
    return Action(**fields)


class TestResolutionGate:
    def test_absent_subject_fails(self):
        store = RoomStore([HE, IT])
        engine = ActionEngine(store)
        with pytest.raises(ActionFailed):
            engine.apply(_make_action(subject=SHE))
        assert store.objects == (HE, IT)

    def test_ambiguous_target_fails(self):
        store = RoomStore([HE, all_of(IT, called("a")), all_of(IT, called("b"))])
        engine = ActionEngine(store)
        with pytest.raises(ActionFailed):
            engine.apply(_make_action(decorate=[(HE, OPEN)]))
        assert store[0] == HE

    def test_disambiguated_target_succeeds(self):
        store = RoomStore([HE, all_of(IT, called("a")), all_of(IT, called("b"))])
        ActionEngine(store).apply(_make_action(target=all_of(IT, called("b"))))
        assert store[2].matches(was_by(Verb.OPEN, HE))


class TestDistinctGate:
    def test_repeated_entity_fails(self):
        store = RoomStore([HE, IT])
        engine = ActionEngine(store)
        with pytest.raises(ActionFailed):
            engine.apply(_make_action(target=HE, distinct=[HE, HE]))

    def test_same_entity_by_different_patterns_fails(self):
        store = RoomStore([all_of(HE, called("Peter")), IT])
        engine = ActionEngine(store)
        with pytest.raises(ActionFailed):
            engine.apply(_make_action(distinct=[HE, called("Peter")]))

    def test_unresolved_members_are_skipped(self):
        store = RoomStore([HE, IT])
        engine = ActionEngine(store)
        engine.apply(_make_action(distinct=[HE, IT, THAT, called("Nobody")]))


class TestRequireGate:
    def test_requirement_met(self):
        store = RoomStore([all_of(HE, has(IT)), IT])
        assert ActionEngine(store).try_apply(_make_action(require=[(HE, has(IT))]))

    def test_requirement_not_met(self):
        store = RoomStore([HE, IT])
        assert not ActionEngine(store).try_apply(_make_action(require=[(HE, has(IT))]))

    def test_requirement_on_unresolved_entity_fails(self):
        store = RoomStore([HE, IT])
        assert not ActionEngine(store).try_apply(_make_action(require=[(SHE, has(IT))]))


class TestPreventGate:
    def test_prevention_triggers(self):
        store = RoomStore([HE, all_of(IT, LOCKED)])
        engine = ActionEngine(store)
        with pytest.raises(ActionFailed):
            engine.apply(_make_action(prevent=[(IT, LOCKED)], decorate=[(IT, OPEN)]))
        assert not store[1].matches(OPEN)

    def test_prevention_on_unresolved_entity_passes(self):
        store = RoomStore([HE, IT])
        assert ActionEngine(store).try_apply(_make_action(prevent=[(SHE, LOCKED)]))

    def test_failure_is_opaque(self):
        """Every refusal looks the same to the caller."""
        store = RoomStore([HE, all_of(IT, LOCKED)])
        engine = ActionEngine(store)
        refusals = [
            _make_action(subject=SHE),
            _make_action(distinct=[HE, HE]),
            _make_action(require=[(HE, has(IT))]),
            _make_action(prevent=[(IT, LOCKED)]),
        ]
        messages = set()
        for action in refusals:
            with pytest.raises(ActionFailed) as exc:
                engine.apply(action)
            messages.add(str(exc.value).replace(str(action), "<action>"))
        assert messages == {"Action refused: <action>"}


class TestMutation:
    def test_no_mutation_after_failed_gate(self):
        store = RoomStore([HE, all_of(IT, OPEN)])
        before = store.objects
        action = _make_action(
            remove=[(IT, OPEN)],
            remove_placement=[IT],
            decorate=[(IT, CLOSED)],
            require=[(HE, has(THAT))],
        )
        assert not ActionEngine(store).try_apply(action)
        assert store.objects == before

    def test_remove_runs_before_decorate(self):
        store = RoomStore([HE, all_of(IT, OPEN, on(THAT))])
        action = _make_action(
            remove=[(IT, OPEN)],
            remove_placement=[IT],
            decorate=[(IT, OPEN), (IT, on(HE))],
        )
        ActionEngine(store).apply(action)
        assert store[1].matches(OPEN)
        assert store[1].is_on(HE)
        assert not store[1].is_on(THAT)

    def test_unresolved_mutation_targets_are_skipped(self):
        store = RoomStore([HE, IT])
        action = _make_action(
            remove=[(SHE, OPEN)],
            remove_placement=[SHE],
            decorate=[(SHE, OPEN), (IT, OPEN)],
        )
        ActionEngine(store).apply(action)
        assert store[1].matches(OPEN)

    def test_decorating_implied_conjunction_adds_nothing(self):
        store = RoomStore([all_of(HE, has(IT)), IT])
        action = _make_action(verb=Verb.TALK, decorate=[(HE, all_of(HE, has(IT)))])
        ActionEngine(store).apply(action)
        assert store[0] == all_of(HE, has(IT), did_to(Verb.TALK, IT))
        assert len(store[0].items) == 3

    def test_history_facts_record_patterns(self):
        store = RoomStore([all_of(HE, called("Peter")), of_type("door")])
        apply(store, Action(subject=called("Peter"), verb=Verb.OPEN, target=of_type("door")))
        assert store[0].matches(did_to(Verb.OPEN, of_type("door")))
        assert store[1].matches(was_by(Verb.OPEN, called("Peter")))
        assert not store[1].matches(was_by(Verb.OPEN, HE))

    def test_history_is_resolved_before_decorate(self):
        """The subject slot is the one found before the action changed anything."""
        store = RoomStore([I, IT])
        action = Action(subject=I, verb=Verb.OPEN, target=IT, decorate=[(IT, I)])
        ActionEngine(store).apply(action)
        assert store[0].matches(did_to(Verb.OPEN, IT))
        assert not store[1].matches(did_to(Verb.OPEN, IT))


class TestConfig:
    def test_history_can_be_disabled(self):
        store = RoomStore([HE, IT])
        engine = ActionEngine(store, EngineConfig(record_history=False))
        engine.apply(_make_action(decorate=[(IT, OPEN)]))
        assert store.objects == (HE, all_of(IT, OPEN))

    def test_apply_is_reentrant_under_lock(self):
        store = RoomStore([HE, IT])
        engine = ActionEngine(store)
        with store.lock:
            engine.apply(_make_action())

    def test_concurrent_callers_are_serialized(self):
        store = RoomStore([HE, of_type("door")])
        engine = ActionEngine(store)
        toggle_open = Action(
            subject=HE, verb=Verb.OPEN, target=of_type("door"),
            decorate=[(of_type("door"), OPEN)],
            remove=[(of_type("door"), CLOSED)],
        )
        toggle_closed = Action(
            subject=HE, verb=Verb.CLOSE, target=of_type("door"),
            decorate=[(of_type("door"), CLOSED)],
            remove=[(of_type("door"), OPEN)],
        )

        def worker(action):
            for _ in range(50):
                engine.apply(action)

        threads = [
            threading.Thread(target=worker, args=(action,))
            for action in (toggle_open, toggle_closed) * 4
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        door = store[1]
        assert door.matches(OPEN) != door.matches(CLOSED)


class TestLogging:
    def test_refusal_reason_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="room_kernel.execution.engine")
        store = RoomStore([HE, IT])
        ActionEngine(store).try_apply(_make_action(distinct=[HE, HE]))
        assert "distinct" in caplog.text
