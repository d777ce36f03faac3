"""
Property Expression — the recursive description of what is true of an entity.

Every node is an immutable pydantic model tagged by a ``kind`` literal, and the
``Property`` alias is the closed, discriminated union of all node kinds.

Nested targets (in placements, roles, possession, keys and history facts) are
patterns, not entity identifiers. They are resolved against a room each time
they are used.
"""

from enum import Enum
from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from room_kernel.models.verb import Verb


class PronounTag(str, Enum):
    """Atomic identity tags for pronoun entities."""

    I = "I"
    YOU = "You"
    HE = "He"
    SHE = "She"
    IT = "It"
    THAT = "That"


class Adjective(str, Enum):
    """Closed set of state flags."""
    DEAD = "Dead"
    MURDERER = "Murderer"
    OPEN = "Open"
    CLOSED = "Closed"
    LOCKED = "Locked"
    UNLOCKED = "Unlocked"


class PlacementKind(str, Enum):
    ON = "On"
    LEAN_TOWARD = "LeanToward"
    IN = "In"
    OUT_OF = "OutOf"


class RoleKind(str, Enum):
    OPPONENT_OF = "OpponentOf"


class PropertyNode(BaseModel):
    """
    Base for every node of a property expression.

    Carries the query helpers used to ask an entity's state about itself,
    e.g. ``room[0].is_on(of_type("ground"))``.
    """

    model_config = ConfigDict(frozen=True)

    def matches(self, pattern: "Property") -> bool:
        """Returns True if this expression satisfies ``pattern``."""
        from room_kernel.matching.algorithm import matches
        return matches(self, pattern)

    def has(self, item: "Property") -> bool:
        return self.matches(has(item))

    def has_not(self, item: "Property") -> bool:
        return self.matches(has_not(item))

    def is_on(self, target: "Property") -> bool:
        return self.matches(on(target))

    def is_leaning_toward(self, target: "Property") -> bool:
        return self.matches(lean_toward(target))

    def is_in(self, target: "Property") -> bool:
        return self.matches(in_(target))

    def is_out_of(self, target: "Property") -> bool:
        return self.matches(out_of(target))

    def is_opponent_of(self, target: "Property") -> bool:
        return self.matches(opponent_of(target))

    def killed(self, target: "Property") -> bool:
        return self.matches(killed(target))

    def was_killed_by(self, target: "Property") -> bool:
        return self.matches(killed_by(target))

    def talked_to(self, target: "Property") -> bool:
        return self.matches(did_to(Verb.TALK, target))

    def was_talked_to_by(self, target: "Property") -> bool:
        return self.matches(was_by(Verb.TALK, target))

    def moved(self, target: "Property") -> bool:
        return self.matches(did_to(Verb.MOVE, target))

    def was_moved_by(self, target: "Property") -> bool:
        return self.matches(was_by(Verb.MOVE, target))

    def locked(self, target: "Property") -> bool:
        return self.matches(did_to(Verb.LOCK, target))

    def closed(self, target: "Property") -> bool:
        return self.matches(did_to(Verb.CLOSE, target))


class Pronoun(PropertyNode):
    """Atomic identity tag. Two pronouns match only when their tags are equal."""

    kind: Literal["pronoun"] = "pronoun"
    tag: PronounTag

    def __str__(self) -> str:
        return self.tag.value


class And(PropertyNode):
    """
    Conjunction of facts.

    As a pattern it means "all of these"; as the state being queried it means
    "at least one of these matches".
    """

    kind: Literal["and"] = "and"
    items: Tuple["Property", ...] = ()

    def __str__(self) -> str:
        return f"And({', '.join(str(item) for item in self.items)})"


class Placement(PropertyNode):
    kind: Literal["placement"] = "placement"
    relation: PlacementKind
    target: "Property"

    def __str__(self) -> str:
        return f"{self.relation.value}({self.target})"


class Role(PropertyNode):
    kind: Literal["role"] = "role"
    role: RoleKind
    target: "Property"

    def __str__(self) -> str:
        return f"{self.role.value}({self.target})"


class Has(PropertyNode):
    kind: Literal["has"] = "has"
    target: "Property"

    def __str__(self) -> str:
        return f"Has({self.target})"


class HasNot(PropertyNode):
    kind: Literal["has_not"] = "has_not"
    target: "Property"

    def __str__(self) -> str:
        return f"HasNot({self.target})"


class Called(PropertyNode):
    kind: Literal["called"] = "called"
    name: str

    def __str__(self) -> str:
        return f"Called({self.name!r})"


class OfType(PropertyNode):
    kind: Literal["of_type"] = "of_type"
    name: str

    def __str__(self) -> str:
        return f"OfType({self.name!r})"


class Adj(PropertyNode):
    kind: Literal["adjective"] = "adjective"
    value: Adjective

    def __str__(self) -> str:
        return self.value.value


class DidTo(PropertyNode):
    """History fact: this entity performed ``verb`` on something matching ``target``."""

    kind: Literal["did_to"] = "did_to"
    verb: Verb
    target: "Property"

    def __str__(self) -> str:
        return f"DidTo({self.verb.value}, {self.target})"


class WasBy(PropertyNode):
    """History fact: this entity received ``verb`` from something matching ``target``."""

    kind: Literal["was_by"] = "was_by"
    verb: Verb
    target: "Property"

    def __str__(self) -> str:
        return f"WasBy({self.verb.value}, {self.target})"


class KeyTo(PropertyNode):
    """Marks an entity as the key that unlocks whatever matches ``target``."""

    kind: Literal["key_to"] = "key_to"
    target: "Property"

    def __str__(self) -> str:
        return f"KeyTo({self.target})"


Property = Annotated[
    Union[
        Pronoun,
        And,
        Placement,
        Role,
        Has,
        HasNot,
        Called,
        OfType,
        Adj,
        DidTo,
        WasBy,
        KeyTo,
    ],
    Field(discriminator="kind"),
]

for _model in (And, Placement, Role, Has, HasNot, DidTo, WasBy, KeyTo):
    _model.model_rebuild()


I = Pronoun(tag=PronounTag.I)
YOU = Pronoun(tag=PronounTag.YOU)
HE = Pronoun(tag=PronounTag.HE)
SHE = Pronoun(tag=PronounTag.SHE)
IT = Pronoun(tag=PronounTag.IT)
THAT = Pronoun(tag=PronounTag.THAT)


# --- Constructors ---

def all_of(*items: Property) -> And:
    return And(items=items)


def on(target: Property) -> Placement:
    return Placement(relation=PlacementKind.ON, target=target)


def lean_toward(target: Property) -> Placement:
    return Placement(relation=PlacementKind.LEAN_TOWARD, target=target)


def in_(target: Property) -> Placement:
    return Placement(relation=PlacementKind.IN, target=target)


def out_of(target: Property) -> Placement:
    return Placement(relation=PlacementKind.OUT_OF, target=target)


def opponent_of(target: Property) -> Role:
    return Role(role=RoleKind.OPPONENT_OF, target=target)


def has(item: Property) -> Has:
    return Has(target=item)


def has_not(item: Property) -> HasNot:
    return HasNot(target=item)


def called(name: str) -> Called:
    return Called(name=name)


def of_type(name: str) -> OfType:
    return OfType(name=name)


def adjective(value: Adjective) -> Adj:
    return Adj(value=value)


def key_to(target: Property) -> KeyTo:
    return KeyTo(target=target)


def did_to(verb: Verb, target: Property) -> DidTo:
    return DidTo(verb=verb, target=target)


def was_by(verb: Verb, target: Property) -> WasBy:
    return WasBy(verb=verb, target=target)


def killed(target: Property) -> DidTo:
    return did_to(Verb.KILL, target)


def killed_by(target: Property) -> WasBy:
    return was_by(Verb.KILL, target)
