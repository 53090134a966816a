"""Business logic for project insights."""

import sqlite3
from datetime import date, datetime, time
from typing import Optional

from pyappgate.domain.models.insights import PromptQueryStat, QueryStatsError
from pyappgate.storage.repositories.query_stat_repository import QueryStatRepository
from pyappgate.utils.class_logger import LoggerMixin
from pyappgate.utils.dates import as_naive_utc


def normalize_bound(value: Optional[str], end_of_day: bool = False) -> Optional[str]:
    """
    Normalize a date range bound to a naive UTC ISO datetime string.

    Query timestamps are stored as naive UTC, so bounds carrying an offset are
    converted to UTC first. Bounds without an offset, and bare dates, are UTC.

    Args:
        value: An ISO date or datetime, or None.
        end_of_day: Whether a bare date should be read as the end of that day.

    Returns:
        The normalized bound, or None if no bound was given.

    Raises:
        QueryStatsError: If the value is not an ISO date or datetime.

    """
    if not value:
        return None
    try:
        if len(value) == 10:
            day = date.fromisoformat(value)
            return datetime.combine(day, time.max if end_of_day else time.min).isoformat()
        return as_naive_utc(datetime.fromisoformat(value)).isoformat()
    except ValueError:
        raise QueryStatsError(f"Invalid date: {value}") from None


class InsightsService(LoggerMixin):
    """Service for reading usage statistics of a project."""

    def __init__(self, query_stat_repository: QueryStatRepository) -> None:
        """
        Initialize the InsightsService.

        Args:
            query_stat_repository: Repository for prompt queries.

        """
        self.query_stat_repository = query_stat_repository

    def get_query_stats(
        self,
        project_id: str,
        from_date: Optional[str],
        to_date: Optional[str],
        limit: int,
        page: int,
    ) -> tuple[list[PromptQueryStat] | None, QueryStatsError | None]:
        """
        Fetch one page of prompt queries for a project.

        Args:
            project_id: The project ID.
            from_date: Start of the date range, ISO formatted.
            to_date: End of the date range, ISO formatted.
            limit: The page size.
            page: The zero-based page number.

        Returns:
            A tuple of (queries, error). Queries are None when there is no result set.

        """
        try:
            lower = normalize_bound(from_date)
            upper = normalize_bound(to_date, end_of_day=True)
            return (
                self.query_stat_repository.get_page(project_id, lower, upper, limit=limit, page=page),
                None,
            )
        except QueryStatsError as e:
            self.logger.warning(f"Rejected query stats request for project {project_id}: {e.message}")
            return None, e
        except sqlite3.Error as e:
            self.logger.error(f"Problem while fetching query stats for project {project_id}: {e}")
            return None, QueryStatsError(str(e))
