"""Repository for prompt query statistics."""

from datetime import datetime
from typing import Optional

from pyappgate.domain.models.insights import PromptQueryStat
from pyappgate.storage.database import Database
from pyappgate.utils.class_logger import LoggerMixin
from pyappgate.utils.dates import as_naive_utc


class QueryStatRepository(LoggerMixin):
    """
    Repository for the prompts submitted to a project.

    Queries run without any per-user filtering. Callers must have checked
    project access beforehand. created_at is stored as naive UTC ISO text so
    that range bounds compare correctly as strings.
    """

    def __init__(self, database: Database) -> None:
        """
        Initialize the repository.

        Args:
            database: The database holding the prompt_queries table.

        """
        self.database = database

    def create(self, stat: PromptQueryStat) -> PromptQueryStat:
        """
        Record a prompt query.

        Args:
            stat: The query to record.

        Returns:
            The recorded query, with created_at converted to naive UTC.

        """
        stat.created_at = as_naive_utc(datetime.fromisoformat(stat.created_at)).isoformat()
        self.database.execute(
            "INSERT INTO prompt_queries (id, project_id, prompt, created_at, no_response, feedback) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            (stat.id, stat.project_id, stat.prompt, stat.created_at, int(stat.no_response), stat.feedback),
        )
        return stat

    def get_page(
        self,
        project_id: str,
        from_date: Optional[str],
        to_date: Optional[str],
        limit: int,
        page: int,
    ) -> list[PromptQueryStat] | None:
        """
        Fetch one page of prompt queries for a project, newest first.

        Args:
            project_id: The project ID.
            from_date: Inclusive lower bound on created_at, as an ISO string.
            to_date: Inclusive upper bound on created_at, as an ISO string.
            limit: The page size.
            page: The zero-based page number.

        Returns:
            The queries on the requested page, or None if the project is unknown.

        """
        if self.database.fetch_one("SELECT id FROM projects WHERE id = ?", (project_id,)) is None:
            return None

        query = "SELECT * FROM prompt_queries WHERE project_id = ?"
        params: list[object] = [project_id]
        if from_date:
            query += " AND created_at >= ?"
            params.append(from_date)
        if to_date:
            query += " AND created_at <= ?"
            params.append(to_date)
        query += " ORDER BY created_at DESC LIMIT ? OFFSET ?"
        params.extend([limit, page * limit])

        rows = self.database.fetch_all(query, tuple(params))
        self.logger.debug(f"Fetched {len(rows)} queries for project {project_id} (page {page}, limit {limit})")
        return [PromptQueryStat.from_row(row) for row in rows]
