"""
Room Store — the ordered, fixed-size collection of entities.

Updated by: Action Engine (push / remove / remove_placement)
Queried by: Action Engine + callers inspecting entity state

Entities are never added or removed after construction. Each slot holds one
property expression, replaced in place as facts are pushed and stripped.
"""

import threading
from typing import Iterable, List, Optional, Tuple

from room_kernel.matching import algorithm
from room_kernel.models.property import Property
from room_kernel.models.room import Room


class ResolutionError(LookupError):
    """
    Raised when a pattern does not identify exactly one entity.

    ``matches`` is empty when nothing matched and holds every candidate
    index when the pattern was ambiguous.
    """

    def __init__(self, pattern: Property, matches: List[int]):
        self.pattern = pattern
        self.matches = matches
        if matches:
            reason = f"ambiguous, candidates {matches}"
        else:
            reason = "no entity matches"
        super().__init__(f"Cannot resolve {pattern}: {reason}")


class RoomStore:
    """
    In-memory entity store. One lock per room serializes callers that apply
    actions concurrently.
    """

    def __init__(self, objects: Iterable[Property] = ()):
        self._room = Room(objects=list(objects))
        self._lock = threading.RLock()

    @property
    def model(self) -> Room:
        """Get the underlying room model."""
        return self._room

    @property
    def objects(self) -> Tuple[Property, ...]:
        """Current entity states, in slot order."""
        return tuple(self._room.objects)

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def __len__(self) -> int:
        return len(self._room.objects)

    def __getitem__(self, index: int) -> Property:
        return self._room.objects[index]

    def get(self, index: int) -> Property:
        """Get the state of the entity in a slot."""
        return self._room.objects[index]

    # --- Lookup ---

    def find_all(self, pattern: Property) -> List[int]:
        """Every slot whose state matches ``pattern``, in slot order."""
        return [
            index for index, obj in enumerate(self._room.objects)
            if algorithm.matches(obj, pattern)
        ]

    def find(self, pattern: Property) -> int:
        """
        Find the single entity identified by ``pattern``.

        Raises ResolutionError if none or more than one entity matches.
        """
        found = self.find_all(pattern)
        if len(found) == 1:
            return found[0]
        raise ResolutionError(pattern, found)

    def resolve(self, pattern: Property) -> Optional[int]:
        """Like find, but returns None instead of raising."""
        try:
            return self.find(pattern)
        except ResolutionError:
            return None

    # --- Mutation ---

    def push(self, index: int, prop: Property) -> None:
        """Add a fact to an entity unless its state already implies it."""
        self._room.objects[index] = algorithm.push(self._room.objects[index], prop)

    def remove(self, index: int, pattern: Property) -> None:
        """Strip every fact of an entity that ``pattern`` matches."""
        self._room.objects[index] = algorithm.remove(self._room.objects[index], pattern)

    def remove_placement(self, index: int) -> None:
        """Strip every placement fact of an entity."""
        self._room.objects[index] = algorithm.remove_placement(self._room.objects[index])

    def get_state_snapshot(self) -> dict:
        """Get a serializable snapshot of the current room state."""
        return self._room.model_dump(mode="json")
