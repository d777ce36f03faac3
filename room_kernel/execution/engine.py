"""
Action Engine — applies declarative actions to a room as one transaction.

Behavioral Contract:
- Resolves every entity pattern against the room at the moment of use
- Gates first (subject/target, distinct, require, prevent); any gate failure
  raises ActionFailed and leaves the room untouched
- Once gating passes, mutation is total: remove, remove_placement, decorate,
  then the DidTo / WasBy history facts
- Never reports which gate failed to the caller
"""

import logging
from contextlib import nullcontext
from typing import Optional, Tuple

from room_kernel.models.action import Action
from room_kernel.models.config import EngineConfig
from room_kernel.models.property import did_to, was_by
from room_kernel.room.store import RoomStore

logger = logging.getLogger(__name__)


class ActionFailed(Exception):
    """Raised when an action is refused. Carries no reason."""

    def __init__(self, action: Action):
        self.action = action
        super().__init__(f"Action refused: {action}")


class ActionEngine:
    """Executes actions against a single room."""

    def __init__(self, store: RoomStore, config: Optional[EngineConfig] = None):
        self.store = store
        self.config = config or EngineConfig()

    def apply(self, action: Action) -> None:
        """
        Apply an action to the room.

        Raises ActionFailed if any gate refuses it; nothing is mutated then.
        """
        guard = self.store.lock if self.config.serialize_access else nullcontext()
        with guard:
            subject, target = self._check_gates(action)
            self._mutate(action, subject, target)
        logger.debug("Applied '%s'", action)

    def try_apply(self, action: Action) -> bool:
        """Apply an action, returning False instead of raising when refused."""
        try:
            self.apply(action)
        except ActionFailed:
            return False
        return True

    def _check_gates(self, action: Action) -> Tuple[int, int]:
        """Run every gate. Returns the resolved (subject, target) slots."""
        store = self.store

        # 1. Subject and target must both resolve uniquely
        subject = store.resolve(action.subject)
        target = store.resolve(action.target)
        if subject is None or target is None:
            logger.debug(
                "Refused '%s': subject or target not uniquely resolved", action
            )
            raise ActionFailed(action)

        # 2. Distinct group; unresolved patterns are skipped
        seen = set()
        for pattern in action.distinct:
            index = store.resolve(pattern)
            if index is None:
                continue
            if index in seen:
                logger.debug(
                    "Refused '%s': %s collides in distinct group", action, pattern
                )
                raise ActionFailed(action)
            seen.add(index)

        # 3. Requirements must resolve and hold
        for entity, prop in action.require:
            index = store.resolve(entity)
            if index is None or not store[index].matches(prop):
                logger.debug(
                    "Refused '%s': requirement %s on %s not met", action, prop, entity
                )
                raise ActionFailed(action)

        # 4. Preventions block only when they resolve and hold
        for entity, prop in action.prevent:
            index = store.resolve(entity)
            if index is not None and store[index].matches(prop):
                logger.debug(
                    "Refused '%s': %s is %s", action, entity, prop
                )
                raise ActionFailed(action)

        return subject, target

    def _mutate(self, action: Action, subject: int, target: int) -> None:
        """Apply every mutation of an approved action. Cannot fail."""
        store = self.store

        # Removals precede decorations: a fact added by this action is
        # never stripped by it.
        for entity, pattern in action.remove:
            index = store.resolve(entity)
            if index is not None:
                store.remove(index, pattern)

        for entity in action.remove_placement:
            index = store.resolve(entity)
            if index is not None:
                store.remove_placement(index)

        for entity, prop in action.decorate:
            index = store.resolve(entity)
            if index is not None:
                store.push(index, prop)

        if self.config.record_history:
            store.push(subject, did_to(action.verb, action.target))
            store.push(target, was_by(action.verb, action.subject))


def apply(store: RoomStore, action: Action) -> None:
    """Apply one action to a room with the default configuration."""
    ActionEngine(store).apply(action)
