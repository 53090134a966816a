"""Repository for projects and their members."""

from datetime import datetime

from pyappgate.storage.database import Database
from pyappgate.utils.class_logger import LoggerMixin


class ProjectRepository(LoggerMixin):
    """Repository for projects and project membership."""

    def __init__(self, database: Database) -> None:
        """
        Initialize the repository.

        Args:
            database: The database holding the project tables.

        """
        self.database = database

    def create(self, project_id: str, name: str) -> str:
        """
        Create a project.

        Args:
            project_id: The project ID.
            name: The project name.

        Returns:
            The project ID.

        """
        self.database.execute(
            "INSERT INTO projects (id, name, created_at) VALUES (?, ?, ?)",
            (project_id, name, datetime.now().isoformat()),
        )
        return project_id

    def add_member(self, project_id: str, user_id: str) -> None:
        """Grant a user access to a project."""
        self.database.execute(
            "INSERT OR IGNORE INTO project_members (project_id, user_id) VALUES (?, ?)", (project_id, user_id)
        )

    def is_member(self, project_id: str, user_id: str) -> bool:
        """
        Check whether a user belongs to a project.

        Args:
            project_id: The project ID.
            user_id: The user ID.

        Returns:
            True if the user is a member of the project.

        """
        row = self.database.fetch_one(
            "SELECT 1 AS member FROM project_members WHERE project_id = ? AND user_id = ?", (project_id, user_id)
        )
        return row is not None
