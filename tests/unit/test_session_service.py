"""Tests for resolving session identities from requests."""

import sqlite3
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from falcon import testing

from pyappgate.domain.models.access import ANONYMOUS, Session, SessionIdentity
from pyappgate.domain.services.session_service import SessionService
from pyappgate.storage.repositories.session_repository import SessionRepository


@pytest.fixture
def session_repository() -> SessionRepository:
    """Create a session repository double knowing a valid and an expired token."""
    now = datetime.now(timezone.utc)
    sessions = {
        "valid": Session(token="valid", user_id="user-1", created_at=now, expires_at=now + timedelta(hours=1)),
        "expired": Session(token="expired", user_id="user-2", created_at=now, expires_at=now - timedelta(seconds=1)),
        "forever": Session(token="forever", user_id="user-3", created_at=now),
    }
    repo = MagicMock(spec=SessionRepository)
    repo.get_by_token.side_effect = sessions.get
    return repo


@pytest.fixture
def session_service(session_repository: SessionRepository) -> SessionService:
    """Create a session service for testing."""
    return SessionService(session_repository, cookie_name="appgate-session")


@pytest.mark.asyncio
async def test_identity_from_cookie(session_service: SessionService) -> None:
    """Test that the session cookie resolves to its user."""
    req = testing.create_asgi_req(headers={"Cookie": "appgate-session=valid"})

    assert await session_service.get_session_identity(req) == SessionIdentity(user_id="user-1")


@pytest.mark.asyncio
async def test_identity_from_bearer_header(session_service: SessionService) -> None:
    """Test that a bearer token resolves to its user."""
    req = testing.create_asgi_req(headers={"Authorization": "Bearer forever"})

    assert await session_service.get_session_identity(req) == SessionIdentity(user_id="user-3")


@pytest.mark.asyncio
async def test_cookie_wins_over_header(session_service: SessionService) -> None:
    """Test that the cookie is preferred when both are present."""
    req = testing.create_asgi_req(headers={"Cookie": "appgate-session=valid", "Authorization": "Bearer forever"})

    identity = await session_service.get_session_identity(req)

    assert identity.user_id == "user-1"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Cookie": "appgate-session=unknown"},
        {"Cookie": "appgate-session=expired"},
        {"Cookie": "other-cookie=valid"},
        {"Authorization": "Basic dXNlcjpwYXNz"},
        {"Authorization": "Bearer "},
    ],
)
async def test_anonymous_requests(session_service: SessionService, headers: dict[str, str]) -> None:
    """Test requests that do not carry a usable session."""
    req = testing.create_asgi_req(headers=headers)

    identity = await session_service.get_session_identity(req)

    assert identity == ANONYMOUS
    assert not identity.is_present


@pytest.mark.asyncio
async def test_lookup_errors_propagate(session_repository: SessionRepository, session_service: SessionService) -> None:
    """Test that a failing session store is not mistaken for an anonymous request."""
    session_repository.get_by_token.side_effect = sqlite3.OperationalError("database is locked")
    req = testing.create_asgi_req(headers={"Cookie": "appgate-session=valid"})

    with pytest.raises(sqlite3.OperationalError):
        await session_service.get_session_identity(req)


def test_no_lookup_without_token(session_repository: SessionRepository, session_service: SessionService) -> None:
    """Test that the store is not queried when there is no token."""
    assert session_service.get_identity_for_token(None) == ANONYMOUS
    session_repository.get_by_token.assert_not_called()


@pytest.mark.parametrize(
    ("expires_at", "now", "expected"),
    [
        (datetime(2024, 3, 1, 12, 0), datetime(2024, 3, 1, 11, 0, tzinfo=timezone.utc), False),
        (datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc), datetime(2024, 3, 1, 12, 30), True),
        (
            datetime(2024, 3, 1, 13, 0, tzinfo=timezone(timedelta(hours=2))),
            datetime(2024, 3, 1, 11, 30, tzinfo=timezone.utc),
            True,
        ),
        (None, datetime(2030, 1, 1, tzinfo=timezone.utc), False),
    ],
)
def test_session_expiry_mixed_timezones(expires_at: datetime | None, now: datetime, expected: bool) -> None:
    """Test that naive and aware timestamps compare as UTC instants."""
    session = Session(token="t", user_id="u", created_at=datetime(2024, 3, 1), expires_at=expires_at)

    assert session.is_expired(now) is expected
