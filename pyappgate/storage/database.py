"""Database connection management."""

import contextlib
import sqlite3
from collections.abc import Iterator
from typing import Any

SQLITE_PREFIX = "sqlite:///"


def sqlite_path(uri: str) -> str:
    """
    Turn a ``sqlite:///`` URI into a path sqlite3 understands.

    Args:
        uri: The database URI, or a plain file path.

    Returns:
        The file path.

    """
    if uri.startswith(SQLITE_PREFIX):
        return uri[len(SQLITE_PREFIX) :]
    return uri


class Database:
    """Database connection manager."""

    def __init__(self, uri: str) -> None:
        """
        Initialize the database connection.

        Args:
            uri: The database URI.

        """
        self.uri = uri
        self.path = sqlite_path(uri)
        self._initialize_db()

    def _initialize_db(self) -> None:
        """Initialize the database schema."""
        with self._get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS sessions (
                    token TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    expires_at TEXT
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS projects (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    created_at TEXT NOT NULL
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS project_members (
                    project_id TEXT NOT NULL,
                    user_id TEXT NOT NULL,
                    PRIMARY KEY (project_id, user_id),
                    FOREIGN KEY (project_id) REFERENCES projects (id)
                        ON DELETE CASCADE
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS prompt_queries (
                    id TEXT PRIMARY KEY,
                    project_id TEXT NOT NULL,
                    prompt TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    no_response INTEGER NOT NULL DEFAULT 0,
                    feedback TEXT,
                    FOREIGN KEY (project_id) REFERENCES projects (id)
                        ON DELETE CASCADE
                )
            """)

            conn.commit()

    @contextlib.contextmanager
    def _get_connection(self) -> Iterator[sqlite3.Connection]:
        """
        Get a database connection.

        Yields:
            A database connection.

        """
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    def execute(self, query: str, params: tuple[Any, ...] | None = None) -> int:
        """
        Execute a statement.

        Args:
            query: The SQL statement.
            params: The statement parameters.

        Returns:
            The number of affected rows.

        """
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params or ())
            conn.commit()
            return cursor.rowcount

    def fetch_one(self, query: str, params: tuple[Any, ...] | None = None) -> dict[str, Any] | None:
        """
        Fetch a single row.

        Args:
            query: The SQL query.
            params: The query parameters.

        Returns:
            The row as a dictionary, or None if not found.

        """
        with self._get_connection() as conn:
            row = conn.execute(query, params or ()).fetchone()
            return dict(row) if row else None

    def fetch_all(self, query: str, params: tuple[Any, ...] | None = None) -> list[dict[str, Any]]:
        """
        Fetch all rows.

        Args:
            query: The SQL query.
            params: The query parameters.

        Returns:
            The rows as a list of dictionaries.

        """
        with self._get_connection() as conn:
            rows = conn.execute(query, params or ()).fetchall()
            return [dict(row) for row in rows]
