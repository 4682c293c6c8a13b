from unittest.mock import MagicMock, patch

import psycopg2
import pytest

from config import DatabaseConfig
from db.connection import ConnectionFactory
from repositories.room_repo import RoomRepository
from models.room import Room


def _factory_with(conn):
    factory = MagicMock(spec=ConnectionFactory)
    factory.get_connection.return_value = conn
    return factory


def _conn_with_cursor(cursor):
    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cursor
    return conn


def test_get_connection_opens_a_new_connection_each_time():
    config = DatabaseConfig(url="postgresql://u:p@h:5432/db", connect_timeout=4)
    with patch("db.connection.psycopg2.connect") as connect:
        connect.side_effect = [MagicMock(), MagicMock()]
        factory = ConnectionFactory(config)

        first = factory.get_connection()
        second = factory.get_connection()

    assert first is not second
    assert connect.call_count == 2
    connect.assert_called_with("postgresql://u:p@h:5432/db", connect_timeout=4)


def test_get_connection_propagates_operational_error():
    factory = ConnectionFactory(DatabaseConfig(url="postgresql://nowhere/db"))
    with patch("db.connection.psycopg2.connect", side_effect=psycopg2.OperationalError("down")):
        with pytest.raises(psycopg2.OperationalError):
            factory.get_connection()


def test_release_connection_closes_open_connection():
    conn = MagicMock(closed=0)
    ConnectionFactory.release_connection(conn)
    conn.close.assert_called_once()


def test_release_connection_skips_already_closed():
    conn = MagicMock(closed=1)
    ConnectionFactory.release_connection(conn)
    conn.close.assert_not_called()


def test_failed_write_rolls_back_and_releases():
    cursor = MagicMock()
    cursor.execute.side_effect = psycopg2.DatabaseError("rejected")
    conn = _conn_with_cursor(cursor)
    factory = _factory_with(conn)

    with pytest.raises(psycopg2.DatabaseError):
        RoomRepository(factory).insert(Room(name="Attic", max_occupancy=2))

    conn.rollback.assert_called_once()
    conn.commit.assert_not_called()
    factory.release_connection.assert_called_once_with(conn)


def test_successful_write_commits_and_releases():
    cursor = MagicMock()
    cursor.fetchone.return_value = (7,)
    conn = _conn_with_cursor(cursor)
    factory = _factory_with(conn)
    room = Room(name="Attic", max_occupancy=2)

    new_id = RoomRepository(factory).insert(room)

    assert new_id == 7
    assert room.id == 7
    conn.commit.assert_called_once()
    factory.release_connection.assert_called_once_with(conn)


def test_update_reports_missing_row():
    cursor = MagicMock(rowcount=0)
    conn = _conn_with_cursor(cursor)
    factory = _factory_with(conn)

    assert RoomRepository(factory).update(Room(id=99, name="Ghost", max_occupancy=1)) is False
    factory.release_connection.assert_called_once_with(conn)
