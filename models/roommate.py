"""
models/roommate.py
------------------
Domain model for a person renting a room.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from models.room import Room


@dataclass
class Roommate:
    """
    Represents a roommate and the room they occupy.

    Attributes:
        id: Database primary key (None for new records).
        first_name: Given name.
        last_name: Family name.
        rent_portion: Share of the rent, in whole percent.
        move_in_date: When the roommate moved in.
        room_id: Foreign key to the occupied room.
        room: The occupied Room, only populated by joined lookups.
    """
    first_name: str
    last_name: str
    rent_portion: int
    room_id: int
    move_in_date: datetime = field(default_factory=datetime.now)
    id: Optional[int] = None
    room: Optional[Room] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return f"{self.id} {self.first_name} {self.last_name} {self.rent_portion}"
