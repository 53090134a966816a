"""Service provider for shared service instances."""

import logging

from pyappgate.config import Config, get_config
from pyappgate.domain.services.access_gate import AccessGate
from pyappgate.domain.services.insights_service import InsightsService
from pyappgate.domain.services.project_service import ProjectService
from pyappgate.domain.services.session_service import SessionService
from pyappgate.storage.database import Database
from pyappgate.storage.repositories.project_repository import ProjectRepository
from pyappgate.storage.repositories.query_stat_repository import QueryStatRepository
from pyappgate.storage.repositories.session_repository import SessionRepository


class ServiceProvider:
    """Provider for shared service instances."""

    _instance = None

    @classmethod
    def get_instance(cls, config: Config | None = None) -> "ServiceProvider":
        """
        Get or create the singleton instance of ServiceProvider.

        Args:
            config: Configuration used when the instance is first created.

        Returns:
            The singleton instance.

        """
        if cls._instance is None:
            cls._instance = cls(config or get_config())
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton so the next call builds a fresh one."""
        cls._instance = None

    def __init__(self, config: Config) -> None:
        """Initialize service provider."""
        self.logger = logging.getLogger("pyappgate.services.provider")
        self.logger.info(f"Initializing shared service provider on {config.database_uri}")
        self.config = config

        self.database = Database(config.database_uri)

        # Initialize repositories
        self.session_repo = SessionRepository(self.database)
        self.project_repo = ProjectRepository(self.database)
        self.query_stat_repo = QueryStatRepository(self.database)

        # Initialize domain services
        self.access_gate = AccessGate()
        self.session_service = SessionService(self.session_repo, cookie_name=config.session_cookie)
        self.project_service = ProjectService(self.project_repo)
        self.insights_service = InsightsService(self.query_stat_repo)
