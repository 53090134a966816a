"""Domain models for project insights."""

from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass
class PromptQueryStat:
    """A single prompt submitted to a project, as reported by the insights endpoint."""

    id: str
    project_id: str
    prompt: str
    created_at: str
    no_response: bool = False
    feedback: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "PromptQueryStat":
        """Build a stat from a database row."""
        return cls(
            id=row["id"],
            project_id=row["project_id"],
            prompt=row["prompt"],
            created_at=row["created_at"],
            no_response=bool(row.get("no_response")),
            feedback=row.get("feedback"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class QueryStatsError(Exception):
    """The data store could not produce query statistics."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
