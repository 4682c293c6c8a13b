import os

import pytest
from docker.errors import DockerException
from testcontainers.postgres import PostgresContainer

from config import DatabaseConfig
from db.connection import ConnectionFactory
from db.init_db import create_tables
from repositories.room_repo import RoomRepository
from repositories.roommate_repo import RoommateRepository


SKIP_WITHOUT_DOCKER_ENV = "ROOMMATES_SKIP_DB_TESTS"


def start_postgres():
    """Start a disposable PostgreSQL; skip instead of failing only when ROOMMATES_SKIP_DB_TESTS=1."""
    try:
        container = PostgresContainer("postgres:16-alpine")
        container.start()
    except DockerException as exc:
        if os.getenv(SKIP_WITHOUT_DOCKER_ENV) == "1":
            pytest.skip(f"Docker is not available: {exc}")
        raise
    return container


@pytest.fixture(scope="session")
def database_url():
    container = start_postgres()
    try:
        host = container.get_container_host_ip()
        port = container.get_exposed_port(5432)
        yield (
            f"postgresql://{container.username}:{container.password}"
            f"@{host}:{port}/{container.dbname}"
        )
    finally:
        container.stop()


@pytest.fixture(scope="session")
def connections(database_url):
    factory = ConnectionFactory(DatabaseConfig(url=database_url))
    create_tables(factory)
    return factory


@pytest.fixture
def clean_db(connections):
    conn = connections.get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute("TRUNCATE roommate, room RESTART IDENTITY;")
        conn.commit()
    finally:
        connections.release_connection(conn)
    return connections


@pytest.fixture
def room_repo(clean_db):
    return RoomRepository(clean_db)


@pytest.fixture
def roommate_repo(clean_db):
    return RoommateRepository(clean_db)
