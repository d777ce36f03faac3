"""Action — a declarative description of one state transition."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict

from room_kernel.models.property import Property
from room_kernel.models.verb import Verb


class Action(BaseModel):
    """
    Gates plus mutations for a single verb, applied by the Action Engine.

    Every entity reference is a pattern resolved against the room when the
    action is applied:
      - decorate / remove: (entity, property) pairs to push / strip
      - remove_placement: entities whose placement facts are cleared
      - require: (entity, property) pairs that must hold
      - prevent: (entity, property) pairs that must not hold
      - distinct: entities that must resolve to pairwise-different slots
    """

    model_config = ConfigDict(frozen=True)

    subject: Property
    verb: Verb
    target: Property                                    # The object of the verb
    decorate: Tuple[Tuple[Property, Property], ...] = ()
    remove: Tuple[Tuple[Property, Property], ...] = ()
    remove_placement: Tuple[Property, ...] = ()
    require: Tuple[Tuple[Property, Property], ...] = ()
    prevent: Tuple[Tuple[Property, Property], ...] = ()
    distinct: Tuple[Property, ...] = ()

    def __str__(self) -> str:
        return f"{self.subject} {self.verb.value} {self.target}"
