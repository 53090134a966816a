"""
Pytest configuration for the pyappgate service.

Each test gets its own sqlite database in a temporary directory, a service
provider built on it, and a Falcon ASGI application wired the same way the
server wires it.
"""

import uuid
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from pyappgate.app import create_app
from pyappgate.config import Config
from pyappgate.domain.models.access import Session
from pyappgate.domain.models.insights import PromptQueryStat
from pyappgate.domain.services.service_provider import ServiceProvider

SESSION_COOKIE = "appgate-session"


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Create a configuration pointing at a throwaway database."""
    return Config(database_uri=f"sqlite:///{tmp_path / 'appgate.db'}", auth_enabled=True, session_cookie=SESSION_COOKIE)


@pytest.fixture
def service_provider(config: Config) -> ServiceProvider:
    """Create a service provider for the test database."""
    return ServiceProvider(config)


@pytest.fixture
def falcon_app(config: Config, service_provider: ServiceProvider) -> App:
    """Create the Falcon ASGI application with authentication enabled."""
    return create_app(config=config, service_provider=service_provider)


@pytest.fixture
def client(falcon_app: App) -> TestClient:
    """
    Create a test client for the application.

    Args:
        falcon_app: The Falcon ASGI application instance to test.

    Returns:
        A Falcon TestClient.

    """
    return TestClient(app=falcon_app)


@pytest.fixture
def make_session(service_provider: ServiceProvider) -> Callable[..., str]:
    """
    Return a factory storing a session and returning its token.

    The factory takes the user ID and an optional lifetime in seconds;
    a negative lifetime creates an already expired session.
    """

    def _make_session(user_id: str = "user-1", ttl: int | None = 3600) -> str:
        now = datetime.now(timezone.utc)
        session = Session(
            token=uuid.uuid4().hex,
            user_id=user_id,
            created_at=now,
            expires_at=now + timedelta(seconds=ttl) if ttl is not None else None,
        )
        service_provider.session_repo.create(session)
        return session.token

    return _make_session


@pytest.fixture
def session_cookies(make_session: Callable[..., str]) -> dict[str, str]:
    """Cookies of a logged-in user."""
    return {SESSION_COOKIE: make_session("user-1")}


@pytest.fixture
def project_id(service_provider: ServiceProvider) -> str:
    """Create a project with user-1 as its only member."""
    service_provider.project_repo.create("proj-1", "Docs")
    service_provider.project_repo.add_member("proj-1", "user-1")
    return "proj-1"


@pytest.fixture
def seed_queries(service_provider: ServiceProvider) -> Callable[..., list[PromptQueryStat]]:
    """Return a factory recording ``count`` prompt queries, one per minute from a start time."""

    def _seed(project_id: str, count: int, start: datetime = datetime(2024, 3, 1, 9, 0)) -> list[PromptQueryStat]:
        stats = []
        for i in range(count):
            stat = PromptQueryStat(
                id=f"{project_id}-q{i}",
                project_id=project_id,
                prompt=f"How do I do thing {i}?",
                created_at=(start + timedelta(minutes=i)).isoformat(),
                no_response=i % 7 == 0,
            )
            stats.append(service_provider.query_stat_repo.create(stat))
        return stats

    return _seed
