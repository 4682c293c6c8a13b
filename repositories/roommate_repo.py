"""
repositories/roommate_repo.py
-----------------------------
Data access layer for roommates.
All SQL queries related to the `roommate` table live here.
"""

from typing import Optional

from db.connection import ConnectionFactory
from models.room import Room
from models.roommate import Roommate
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, first_name, last_name, rent_portion, move_in_date, room_id"


class RoommateRepository:
    """Repository for CRUD operations on the roommate table."""

    def __init__(self, connections: ConnectionFactory):
        self._connections = connections

    # ── READ ──────────────────────────────────────────────

    def get_all(self) -> list[Roommate]:
        """Fetch every roommate in storage order."""
        sql = f"SELECT {_COLUMNS} FROM roommate ORDER BY id;"
        conn = self._connections.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_roommate(r) for r in cur.fetchall()]
        finally:
            self._connections.release_connection(conn)

    def get_by_id(self, roommate_id: int) -> Optional[Roommate]:
        """
        Fetch a single roommate by ID, including the `room_id` foreign key.

        Returns:
            A Roommate object or None if not found.
        """
        sql = f"SELECT {_COLUMNS} FROM roommate WHERE id = %s;"
        conn = self._connections.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (roommate_id,))
                row = cur.fetchone()
                return self._row_to_roommate(row) if row else None
        finally:
            self._connections.release_connection(conn)

    def get_by_id_with_room(self, roommate_id: int) -> Optional[Roommate]:
        """Fetch a roommate together with the full Room they occupy."""
        sql = """
            SELECT rm.id, rm.first_name, rm.last_name, rm.rent_portion,
                   rm.move_in_date, rm.room_id, r.name, r.max_occupancy
            FROM roommate rm
            JOIN room r ON r.id = rm.room_id
            WHERE rm.id = %s;
        """
        conn = self._connections.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (roommate_id,))
                row = cur.fetchone()
        finally:
            self._connections.release_connection(conn)

        if not row:
            return None
        roommate = self._row_to_roommate(row)
        roommate.room = Room(id=roommate.room_id, name=row[6], max_occupancy=row[7])
        return roommate

    def get_by_room(self, room_id: int) -> list[Roommate]:
        """Fetch all roommates occupying the given room."""
        sql = f"SELECT {_COLUMNS} FROM roommate WHERE room_id = %s ORDER BY id;"
        conn = self._connections.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (room_id,))
                return [self._row_to_roommate(r) for r in cur.fetchall()]
        finally:
            self._connections.release_connection(conn)

    # ── CREATE ────────────────────────────────────────────

    def insert(self, roommate: Roommate) -> int:
        """
        Insert a new roommate.

        Args:
            roommate: The Roommate to persist. Its `id` is overwritten with
                the generated key.

        Returns:
            The generated roommate ID.

        Raises:
            psycopg2.errors.ForeignKeyViolation: If `room_id` names no room.
            psycopg2.errors.NotNullViolation: If `room_id` is missing.
        """
        sql = """
            INSERT INTO roommate (first_name, last_name, rent_portion, move_in_date, room_id)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING id;
        """
        conn = self._connections.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    roommate.first_name, roommate.last_name, roommate.rent_portion,
                    roommate.move_in_date, roommate.room_id,
                ))
                roommate.id = cur.fetchone()[0]
            conn.commit()
            logger.info(f"Added roommate #{roommate.id} ({roommate.full_name})")
            return roommate.id
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add roommate {roommate.full_name!r}: {e}")
            raise
        finally:
            self._connections.release_connection(conn)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, roommate: Roommate) -> bool:
        """
        Overwrite every mutable field of an existing roommate.

        Returns:
            True if a row was updated, False if no roommate has that ID.
        """
        sql = """
            UPDATE roommate
            SET first_name = %s, last_name = %s, rent_portion = %s,
                move_in_date = %s, room_id = %s
            WHERE id = %s;
        """
        conn = self._connections.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    roommate.first_name, roommate.last_name, roommate.rent_portion,
                    roommate.move_in_date, roommate.room_id, roommate.id,
                ))
                updated = cur.rowcount > 0
            conn.commit()
            if not updated:
                logger.warning(f"Update matched no roommate with id {roommate.id}")
            return updated
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update roommate #{roommate.id}: {e}")
            raise
        finally:
            self._connections.release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, roommate_id: int) -> bool:
        """
        Delete a roommate by ID.

        Returns:
            True if a row was deleted, False otherwise.
        """
        sql = "DELETE FROM roommate WHERE id = %s;"
        conn = self._connections.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (roommate_id,))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted roommate #{roommate_id}")
            return deleted
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete roommate #{roommate_id}: {e}")
            raise
        finally:
            self._connections.release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_roommate(row: tuple) -> Roommate:
        """Convert a database row tuple to a Roommate domain object."""
        return Roommate(
            id=row[0],
            first_name=row[1],
            last_name=row[2],
            rent_portion=row[3],
            move_in_date=row[4],
            room_id=row[5],
        )
