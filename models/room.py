"""
models/room.py
--------------
Domain model for a room in the house.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Room:
    """
    Represents a physical space roommates can occupy.

    Attributes:
        id: Database primary key (None for new records).
        name: Display name (e.g., 'Front Bedroom').
        max_occupancy: How many people the room is meant to hold.
    """
    name: str
    max_occupancy: int
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.id} {self.name} {self.max_occupancy}"
