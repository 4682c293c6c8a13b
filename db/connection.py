"""
db/connection.py
----------------
Hands out PostgreSQL connections.
Every call opens a fresh psycopg2 connection; callers release it in a
`finally` block once their single statement is done.
"""

import psycopg2

from config import DatabaseConfig
from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionFactory:
    """Creates a new database connection per request from a fixed config."""

    def __init__(self, config: DatabaseConfig):
        self._config = config

    @property
    def config(self) -> DatabaseConfig:
        return self._config

    def get_connection(self):
        """
        Open a new connection.

        Returns:
            A psycopg2 connection object.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        try:
            return psycopg2.connect(
                self._config.url,
                connect_timeout=self._config.connect_timeout,
            )
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to connect to database: {e}")
            raise

    @staticmethod
    def release_connection(conn) -> None:
        """
        Close a connection obtained from `get_connection`.

        Args:
            conn: The psycopg2 connection to release.
        """
        if not conn.closed:
            conn.close()
