"""
Verb vocabulary — builders that assemble an Action for each everyday verb.

These are pure data builders. All behavior comes from the Action Engine
applying the gates and mutations they describe.
"""

from room_kernel.models.action import Action
from room_kernel.models.property import (
    Adjective,
    Placement,
    PlacementKind,
    Property,
    adjective,
    has,
    has_not,
    in_,
    key_to,
    lean_toward,
    on,
    opponent_of,
    out_of,
)
from room_kernel.models.verb import Verb


def moves(subject: Property, obj: Property, place: Placement) -> Action:
    """Move ``obj`` to ``place``."""
    remove = []
    if place.relation == PlacementKind.ON:
        # Whatever it is put on can no longer be on it.
        remove.append((place.target, on(obj)))
    return Action(
        subject=subject, verb=Verb.MOVE, target=obj,
        decorate=[(obj, place)],
        remove=remove,
        remove_placement=[obj],
        distinct=[subject, obj],
    )


def gives_item(subject: Property, to: Property, item: Property) -> Action:
    """
    Give ``to`` an item.

    The item is unique, so the giver no longer has it afterwards.
    """
    return Action(
        subject=subject, verb=Verb.GIVE, target=to,
        decorate=[
            (subject, has_not(item)),
            (to, has(item)),
        ],
        remove=[
            (subject, has(item)),
            (to, has_not(item)),
        ],
        remove_placement=[item],
        prevent=[(subject, has_not(item))],
        distinct=[subject, to, item],
    )


def gives_to(subject: Property, item: Property, to: Property) -> Action:
    return gives_item(subject, to, item)


def kills(subject: Property, obj: Property) -> Action:
    return Action(
        subject=subject, verb=Verb.KILL, target=obj,
        decorate=[
            (subject, adjective(Adjective.MURDERER)),
            (obj, adjective(Adjective.DEAD)),
        ],
    )


def talks_to(subject: Property, obj: Property) -> Action:
    return Action(subject=subject, verb=Verb.TALK, target=obj)


def opens(subject: Property, obj: Property) -> Action:
    return Action(
        subject=subject, verb=Verb.OPEN, target=obj,
        decorate=[(obj, adjective(Adjective.OPEN))],
        remove=[(obj, adjective(Adjective.CLOSED))],
        prevent=[(obj, adjective(Adjective.LOCKED))],
        distinct=[subject, obj],
    )


def closes(subject: Property, obj: Property) -> Action:
    return Action(
        subject=subject, verb=Verb.CLOSE, target=obj,
        decorate=[(obj, adjective(Adjective.CLOSED))],
        remove=[(obj, adjective(Adjective.OPEN))],
        distinct=[subject, obj],
    )


def walks_through(subject: Property, obj: Property) -> Action:
    return Action(
        subject=subject, verb=Verb.WALK_THROUGH, target=obj,
        prevent=[(obj, adjective(Adjective.CLOSED))],
        distinct=[subject, obj],
    )


def locks(subject: Property, obj: Property) -> Action:
    return Action(
        subject=subject, verb=Verb.LOCK, target=obj,
        decorate=[
            (obj, adjective(Adjective.LOCKED)),
            (obj, adjective(Adjective.CLOSED)),
        ],
        remove=[(obj, adjective(Adjective.UNLOCKED))],
        distinct=[subject, obj],
    )


def unlocks(subject: Property, obj: Property) -> Action:
    """Unlock ``obj``. The subject must hold the key to it."""
    return Action(
        subject=subject, verb=Verb.UNLOCK, target=obj,
        decorate=[(obj, adjective(Adjective.UNLOCKED))],
        remove=[(obj, adjective(Adjective.LOCKED))],
        require=[(subject, has(key_to(obj)))],
        distinct=[subject, obj],
    )


def picks_up(subject: Property, obj: Property) -> Action:
    return Action(
        subject=subject, verb=Verb.PICK_UP, target=obj,
        decorate=[(subject, has(obj))],
        remove=[(subject, has_not(obj))],
        remove_placement=[obj],
        distinct=[subject, obj],
    )


def carries(subject: Property, obj: Property) -> Action:
    return Action(
        subject=subject, verb=Verb.CARRY, target=obj,
        decorate=[(subject, has(obj))],
        remove=[(subject, has_not(obj))],
        remove_placement=[obj],
        distinct=[subject, obj],
    )


def puts_down(subject: Property, obj: Property) -> Action:
    return Action(
        subject=subject, verb=Verb.PUT_DOWN, target=obj,
        decorate=[(subject, has_not(obj))],
        remove=[(subject, has(obj))],
        distinct=[subject, obj],
    )


def climbs_to(subject: Property, obj: Property, place: Placement) -> Action:
    """Climb ``obj`` to end up at ``place``."""
    return Action(
        subject=subject, verb=Verb.CLIMB, target=obj,
        decorate=[(subject, place)],
        remove_placement=[subject],
        distinct=[subject, obj, place],
    )


def climbs_out_of(subject: Property, obj: Property) -> Action:
    return climbs_to(subject, obj, out_of(obj))


def climbs_into(subject: Property, obj: Property) -> Action:
    return climbs_to(subject, obj, in_(obj))


def stands_on(subject: Property, obj: Property) -> Action:
    return Action(
        subject=subject, verb=Verb.STAND_ON, target=obj,
        decorate=[(subject, on(obj))],
        distinct=[subject, obj],
    )


def leans_toward(subject: Property, obj: Property) -> Action:
    return Action(
        subject=subject, verb=Verb.LEAN_TOWARD, target=obj,
        decorate=[(subject, lean_toward(obj))],
        distinct=[subject, obj],
    )


def sleeps_in(subject: Property, obj: Property) -> Action:
    return Action(
        subject=subject, verb=Verb.SLEEP_IN, target=obj,
        decorate=[(subject, in_(obj))],
        distinct=[subject, obj],
    )


def wakes_up_in(subject: Property, obj: Property) -> Action:
    return Action(
        subject=subject, verb=Verb.WAKE_UP_IN, target=obj,
        decorate=[(subject, in_(obj))],
        distinct=[subject, obj],
    )


def plays_against(subject: Property, game: Property, opponent: Property) -> Action:
    """Play ``game`` against ``opponent``; each becomes the other's opponent."""
    return Action(
        subject=subject, verb=Verb.PLAY, target=game,
        decorate=[
            (subject, opponent_of(opponent)),
            (opponent, opponent_of(subject)),
        ],
        distinct=[subject, game, opponent],
    )
