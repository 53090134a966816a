"""Repository for login sessions."""

from datetime import datetime

from pyappgate.domain.models.access import Session
from pyappgate.storage.database import Database
from pyappgate.utils.class_logger import LoggerMixin
from pyappgate.utils.dates import as_utc


class SessionRepository(LoggerMixin):
    """Repository for login sessions."""

    def __init__(self, database: Database) -> None:
        """
        Initialize the repository.

        Args:
            database: The database holding the sessions table.

        """
        self.database = database

    def create(self, session: Session) -> Session:
        """
        Store a session.

        Args:
            session: The session to store.

        Returns:
            The stored session.

        """
        self.database.execute(
            "INSERT OR REPLACE INTO sessions (token, user_id, created_at, expires_at) VALUES (?, ?, ?, ?)",
            (
                session.token,
                session.user_id,
                as_utc(session.created_at).isoformat(),
                as_utc(session.expires_at).isoformat() if session.expires_at else None,
            ),
        )
        self.logger.debug(f"Stored session for user {session.user_id}")
        return session

    def get_by_token(self, token: str) -> Session | None:
        """
        Look up a session by its token.

        Args:
            token: The session token.

        Returns:
            The session, or None if not found. Timestamps are returned in UTC;
            stored values without an offset are read as UTC.

        """
        row = self.database.fetch_one(
            "SELECT token, user_id, created_at, expires_at FROM sessions WHERE token = ?", (token,)
        )
        if row is None:
            return None
        return Session(
            token=row["token"],
            user_id=row["user_id"],
            created_at=as_utc(datetime.fromisoformat(row["created_at"])),
            expires_at=as_utc(datetime.fromisoformat(row["expires_at"])) if row["expires_at"] else None,
        )
