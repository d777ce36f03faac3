"""Room — the ordered collection of entity states."""

from typing import List

from pydantic import BaseModel

from room_kernel.models.property import Property


class Room(BaseModel):
    """One property expression per entity slot. Slot order is fixed at creation."""

    objects: List[Property] = []
