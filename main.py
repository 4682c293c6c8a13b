"""
main.py
-------
Entry point for the Roommates console demo.

Walks through every repository operation once: lists rooms and roommates,
looks up a record of each, inserts a room and a roommate typed in at the
prompt, updates the new room and deletes a room by a fixed ID.
"""

from datetime import datetime
from typing import Callable

from config import DatabaseConfig
from db.connection import ConnectionFactory
from models.room import Room
from models.roommate import Roommate
from repositories.room_repo import RoomRepository
from repositories.roommate_repo import RoommateRepository
from utils.logger import get_logger

logger = get_logger(__name__)

LOOKUP_ID = 1
DELETE_ROOM_ID = 10
SEPARATOR = "-" * 30


def run_demo(
    room_repo: RoomRepository,
    roommate_repo: RoommateRepository,
    read: Callable[[str], str] = input,
) -> None:
    """Run the fixed sequence of CRUD calls, printing each result."""

    # ── 1. List everything ────────────────────────────────
    print("Getting All Rooms:")
    print()
    for room in room_repo.get_all():
        print(room)

    print(SEPARATOR)
    print("Getting All Roommates:")
    print()
    for roommate in roommate_repo.get_all():
        print(roommate)

    # ── 2. Single lookups ─────────────────────────────────
    print(SEPARATOR)
    print(f"Getting Room with Id {LOOKUP_ID}")
    single_room = room_repo.get_by_id(LOOKUP_ID)
    print(single_room if single_room else f"No room with id {LOOKUP_ID}")

    print(SEPARATOR)
    print(f"Getting Roommate with Id {LOOKUP_ID}")
    single_roommate = roommate_repo.get_by_id(LOOKUP_ID)
    print(single_roommate if single_roommate else f"No roommate with id {LOOKUP_ID}")

    # ── 3. Insert a room ──────────────────────────────────
    bathroom = Room(name="Bathroom", max_occupancy=1)
    room_repo.insert(bathroom)
    print(SEPARATOR)
    print(f"Added the new Room with id {bathroom.id}")

    # ── 4. Insert a roommate from the console ─────────────
    print(SEPARATOR)
    first_name = read("First name: ").strip()
    last_name = read("Last name: ").strip()
    rent_portion = int(read("Rent portion: ").strip())
    newcomer = Roommate(
        first_name=first_name,
        last_name=last_name,
        rent_portion=rent_portion,
        move_in_date=datetime.now(),
        room_id=bathroom.id,
    )
    roommate_repo.insert(newcomer)
    print(f"Added the new Roommate with id {newcomer.id}")

    # ── 5. Update the new room ────────────────────────────
    bathroom.name = "Bathroom2"
    bathroom.max_occupancy = 2
    print(SEPARATOR)
    if room_repo.update(bathroom):
        print(f"Updated Room with id {bathroom.id}")
    else:
        print(f"No room with id {bathroom.id} to update")

    # ── 6. Delete ─────────────────────────────────────────
    print(SEPARATOR)
    if room_repo.delete(DELETE_ROOM_ID):
        print(f"Deleted Room with id {DELETE_ROOM_ID}")
    else:
        print(f"No room with id {DELETE_ROOM_ID} to delete")


def main() -> None:
    """Wire the repositories to the configured database and run the demo."""
    config = DatabaseConfig.from_env()
    connections = ConnectionFactory(config)
    logger.info("Starting Roommates demo...")
    run_demo(RoomRepository(connections), RoommateRepository(connections))
    logger.info("Roommates demo finished.")


if __name__ == "__main__":
    main()
