"""Room Kernel data models."""

from room_kernel.models.action import Action
from room_kernel.models.config import EngineConfig
from room_kernel.models.property import (
    HE,
    I,
    IT,
    SHE,
    THAT,
    YOU,
    Adj,
    Adjective,
    And,
    Called,
    DidTo,
    Has,
    HasNot,
    KeyTo,
    OfType,
    Placement,
    PlacementKind,
    Pronoun,
    PronounTag,
    Property,
    PropertyNode,
    Role,
    RoleKind,
    WasBy,
)
from room_kernel.models.room import Room
from room_kernel.models.verb import Verb

__all__ = [
    "HE",
    "I",
    "IT",
    "SHE",
    "THAT",
    "YOU",
    "Action",
    "Adj",
    "Adjective",
    "And",
    "Called",
    "DidTo",
    "EngineConfig",
    "Has",
    "HasNot",
    "KeyTo",
    "OfType",
    "Placement",
    "PlacementKind",
    "Pronoun",
    "PronounTag",
    "Property",
    "PropertyNode",
    "Role",
    "RoleKind",
    "Room",
    "Verb",
    "WasBy",
]
