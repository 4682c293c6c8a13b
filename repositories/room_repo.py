"""
repositories/room_repo.py
-------------------------
Data access layer for rooms.
All SQL queries related to the `room` table live here.
"""

from typing import Optional

from db.connection import ConnectionFactory
from models.room import Room
from utils.logger import get_logger

logger = get_logger(__name__)


class RoomRepository:
    """Repository for CRUD operations on the room table."""

    def __init__(self, connections: ConnectionFactory):
        self._connections = connections

    # ── READ ──────────────────────────────────────────────

    def get_all(self) -> list[Room]:
        """Fetch every room in storage order."""
        sql = "SELECT id, name, max_occupancy FROM room ORDER BY id;"
        conn = self._connections.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_room(r) for r in cur.fetchall()]
        finally:
            self._connections.release_connection(conn)

    def get_by_id(self, room_id: int) -> Optional[Room]:
        """
        Fetch a single room by ID.

        Returns:
            A Room object or None if not found.
        """
        sql = "SELECT id, name, max_occupancy FROM room WHERE id = %s;"
        conn = self._connections.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (room_id,))
                row = cur.fetchone()
                return self._row_to_room(row) if row else None
        finally:
            self._connections.release_connection(conn)

    # ── CREATE ────────────────────────────────────────────

    def insert(self, room: Room) -> int:
        """
        Insert a new room.

        Args:
            room: The Room to persist. Its `id` is overwritten with the
                generated key.

        Returns:
            The generated room ID.
        """
        sql = "INSERT INTO room (name, max_occupancy) VALUES (%s, %s) RETURNING id;"
        conn = self._connections.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (room.name, room.max_occupancy))
                room.id = cur.fetchone()[0]
            conn.commit()
            logger.info(f"Added room #{room.id} ({room.name})")
            return room.id
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add room {room.name!r}: {e}")
            raise
        finally:
            self._connections.release_connection(conn)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, room: Room) -> bool:
        """
        Overwrite the name and occupancy of an existing room.

        Returns:
            True if a row was updated, False if no room has that ID.
        """
        sql = "UPDATE room SET name = %s, max_occupancy = %s WHERE id = %s;"
        conn = self._connections.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (room.name, room.max_occupancy, room.id))
                updated = cur.rowcount > 0
            conn.commit()
            if not updated:
                logger.warning(f"Update matched no room with id {room.id}")
            return updated
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update room #{room.id}: {e}")
            raise
        finally:
            self._connections.release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, room_id: int) -> bool:
        """
        Delete a room by ID.

        Returns:
            True if a row was deleted, False otherwise.
        """
        sql = "DELETE FROM room WHERE id = %s;"
        conn = self._connections.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (room_id,))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted room #{room_id}")
            return deleted
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete room #{room_id}: {e}")
            raise
        finally:
            self._connections.release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_room(row: tuple) -> Room:
        """Convert a database row tuple to a Room domain object."""
        return Room(id=row[0], name=row[1], max_occupancy=row[2])
