"""
Matching Algorithm — structural comparison of property expressions.

Behavioral Contract:
- ``matches`` is pure and total. It is NOT symmetric:
    1. A conjunction pattern requires the subject to match every element.
    2. Otherwise a conjunction subject needs only one element to match.
    3. Otherwise both sides must be the same kind and compare structurally.
- ``push``, ``remove`` and ``remove_placement`` never mutate their input;
  they return the updated expression for the caller to store.
"""

from typing import Callable, Dict

from room_kernel.models.property import (
    Adj,
    And,
    Placement,
    Pronoun,
    Property,
    Role,
)


def _match_pronoun(subject: Pronoun, pattern: Pronoun) -> bool:
    return subject.tag == pattern.tag


def _match_placement(subject: Placement, pattern: Placement) -> bool:
    return subject.relation == pattern.relation and matches(subject.target, pattern.target)


def _match_role(subject: Role, pattern: Role) -> bool:
    return subject.role == pattern.role and matches(subject.target, pattern.target)


def _match_target(subject, pattern) -> bool:
    return matches(subject.target, pattern.target)


def _match_name(subject, pattern) -> bool:
    return subject.name == pattern.name


def _match_adjective(subject: Adj, pattern: Adj) -> bool:
    return subject.value == pattern.value


def _match_history(subject, pattern) -> bool:
    return subject.verb == pattern.verb and matches(subject.target, pattern.target)


# Same-kind comparison for every non-conjunction kind. Must stay in sync with
# the Property union.
_SAME_KIND: Dict[str, Callable[[Property, Property], bool]] = {
    "pronoun": _match_pronoun,
    "placement": _match_placement,
    "role": _match_role,
    "has": _match_target,
    "has_not": _match_target,
    "called": _match_name,
    "of_type": _match_name,
    "adjective": _match_adjective,
    "did_to": _match_history,
    "was_by": _match_history,
    "key_to": _match_target,
}


def matches(subject: Property, pattern: Property) -> bool:
    """Returns True if ``subject`` satisfies ``pattern``."""
    if isinstance(pattern, And):
        # More than one criterion: every one must hold.
        return all(matches(subject, item) for item in pattern.items)
    if isinstance(subject, And):
        return any(matches(item, pattern) for item in subject.items)
    if subject.kind != pattern.kind:
        return False
    return _SAME_KIND[subject.kind](subject, pattern)


def push(expr: Property, prop: Property) -> Property:
    """
    Add a fact to an entity's expression.

    A fact already implied by the current state is not added again.
    """
    if matches(expr, prop):
        return expr
    if isinstance(expr, And):
        if any(matches(item, prop) for item in expr.items):
            return expr
        return And(items=expr.items + (prop,))
    return And(items=(expr, prop))


def remove_placement(expr: Property) -> Property:
    """Drop every placement fact, whatever its relation. Atoms are unchanged."""
    if not isinstance(expr, And):
        return expr
    return And(items=tuple(item for item in expr.items if not isinstance(item, Placement)))


def remove(expr: Property, pattern: Property) -> Property:
    """
    Drop every conjunction element that ``pattern`` matches. Atoms are unchanged.

    The test runs pattern-against-element, so e.g. ``has(X)`` strips the
    possession fact by its own shape.
    """
    if not isinstance(expr, And):
        return expr
    return And(items=tuple(item for item in expr.items if not matches(pattern, item)))
