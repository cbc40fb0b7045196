"""Database access for services.

Services depend on the small Database protocol below instead of psycopg2, so
unit tests can hand them a mock whose get_cursor() yields a fake cursor.
"""

from contextlib import contextmanager
from typing import Protocol

import psycopg2
from psycopg2.extensions import ISOLATION_LEVEL_AUTOCOMMIT


class Database(Protocol):
    """Anything that can hand out a cursor inside a context manager."""

    @contextmanager
    def get_cursor(self):
        """Yield a DB-API cursor and release its connection afterwards."""
        ...


class PostgreSQLDatabase:
    """PostgreSQL implementation of the Database protocol.

    Every get_cursor() call opens its own autocommit connection, so each
    statement (including INSERT ... ON CONFLICT) is committed on its own.
    """

    def __init__(self, connection_string: str):
        """
        Args:
            connection_string: libpq URL, e.g. "postgresql://user:pw@host:5432/vacancies_db"

        Raises:
            ValueError: If connection_string is empty
        """
        if not connection_string:
            raise ValueError("Connection string is required")
        self.connection_string = connection_string

    @contextmanager
    def get_cursor(self):
        """Open a connection and yield a cursor on it.

        Example:
            with db.get_cursor() as cur:
                cur.execute("SELECT * FROM public.vacancies")
                rows = cur.fetchall()
        """
        conn = psycopg2.connect(self.connection_string)
        try:
            conn.set_isolation_level(ISOLATION_LEVEL_AUTOCOMMIT)
            with conn.cursor() as cur:
                yield cur
        finally:
            conn.close()
