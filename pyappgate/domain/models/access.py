"""Domain models for session identities and access decisions."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from pyappgate.utils.dates import as_utc, utc_now


@dataclass(frozen=True)
class SessionIdentity:
    """The authenticated user behind a request, if any."""

    user_id: Optional[str] = None

    @property
    def is_present(self) -> bool:
        """Whether the request carries an authenticated user."""
        return self.user_id is not None


ANONYMOUS = SessionIdentity()


@dataclass
class Session:
    """A stored login session."""

    token: str
    user_id: str
    created_at: datetime
    expires_at: Optional[datetime] = None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """
        Check whether the session has expired.

        Args:
            now: The reference time. Defaults to the current time. Naive values are read as UTC.

        Returns:
            True if the session has an expiry time and it has passed.

        """
        if self.expires_at is None:
            return False
        return as_utc(self.expires_at) <= as_utc(now or utc_now())


class DecisionAction(Enum):
    """What the caller should do with a request."""

    CONTINUE = "continue"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class Decision:
    """Outcome of the access gate for one request."""

    action: DecisionAction
    target: Optional[str] = None

    @classmethod
    def proceed(cls) -> "Decision":
        """Let the request through unchanged."""
        return cls(DecisionAction.CONTINUE)

    @classmethod
    def redirect_to(cls, target: str) -> "Decision":
        """Send the client to another path."""
        return cls(DecisionAction.REDIRECT, target)

    @property
    def is_redirect(self) -> bool:
        return self.action is DecisionAction.REDIRECT
