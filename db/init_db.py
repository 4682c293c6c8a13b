"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist,
and optionally seeds a few sample rows for the demo script.
Run this module directly to initialize a fresh database:
    python -m db.init_db --seed
"""

import argparse

from config import DatabaseConfig
from db.connection import ConnectionFactory
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Rooms: physical spaces with an occupancy limit
CREATE TABLE IF NOT EXISTS room (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(55) NOT NULL,
    max_occupancy   INT NOT NULL
);

-- Roommates: people renting a share of the house, each in at most one room
CREATE TABLE IF NOT EXISTS roommate (
    id              SERIAL PRIMARY KEY,
    first_name      VARCHAR(55) NOT NULL,
    last_name       VARCHAR(55) NOT NULL,
    rent_portion    INT NOT NULL,
    move_in_date    TIMESTAMP NOT NULL,
    room_id         INT NOT NULL REFERENCES room(id)
);

CREATE INDEX IF NOT EXISTS idx_roommate_room ON roommate(room_id);
"""

SAMPLE_ROOMS = [
    ("Front Bedroom", 2),
    ("Back Bedroom", 1),
    ("Basement", 4),
]

SAMPLE_ROOMMATES = [
    # first_name, last_name, rent_portion, move_in_date, room index (1-based)
    ("Wilma", "Flintstone", 20, "2021-01-25", 1),
    ("Barney", "Rubble", 40, "2021-01-25", 2),
    ("Bamm-Bamm", "Rubble", 40, "2021-01-25", 3),
]


def create_tables(connections: ConnectionFactory) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = connections.get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        connections.release_connection(conn)


def seed_sample_data(connections: ConnectionFactory) -> bool:
    """
    Insert sample rooms and roommates when the room table is empty.

    Returns:
        True if rows were inserted, False if data was already present.
    """
    conn = connections.get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute("SELECT COUNT(*) FROM room;")
            if cur.fetchone()[0] > 0:
                return False
            room_ids = []
            for name, max_occupancy in SAMPLE_ROOMS:
                cur.execute(
                    "INSERT INTO room (name, max_occupancy) VALUES (%s, %s) RETURNING id;",
                    (name, max_occupancy),
                )
                room_ids.append(cur.fetchone()[0])
            for first, last, rent, moved_in, room_index in SAMPLE_ROOMMATES:
                cur.execute(
                    """
                    INSERT INTO roommate (first_name, last_name, rent_portion, move_in_date, room_id)
                    VALUES (%s, %s, %s, %s, %s);
                    """,
                    (first, last, rent, moved_in, room_ids[room_index - 1]),
                )
        conn.commit()
        logger.info(
            f"Seeded {len(SAMPLE_ROOMS)} rooms and {len(SAMPLE_ROOMMATES)} roommates."
        )
        return True
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to seed sample data: {e}")
        raise
    finally:
        connections.release_connection(conn)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the Roommates schema.")
    parser.add_argument("--seed", action="store_true", help="insert sample rows into an empty database")
    args = parser.parse_args()

    factory = ConnectionFactory(DatabaseConfig.from_env())
    create_tables(factory)
    print("Database schema created successfully.")
    if args.seed:
        if seed_sample_data(factory):
            print("Sample data inserted.")
        else:
            print("Database already has rooms; skipped sample data.")
