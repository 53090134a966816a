"""Session lookup for incoming requests."""

import falcon

from pyappgate.domain.models.access import ANONYMOUS, SessionIdentity
from pyappgate.storage.repositories.session_repository import SessionRepository
from pyappgate.utils.class_logger import LoggerMixin
from pyappgate.utils.dates import utc_now

BEARER_PREFIX = "bearer "


class SessionService(LoggerMixin):
    """Resolve the session identity behind a request."""

    def __init__(self, session_repository: SessionRepository, cookie_name: str = "appgate-session") -> None:
        """
        Initialize the SessionService.

        Args:
            session_repository: Storage for login sessions.
            cookie_name: Name of the cookie carrying the session token.

        """
        self.session_repository = session_repository
        self.cookie_name = cookie_name

    def get_token(self, req: falcon.Request) -> str | None:
        """
        Extract the session token from a request.

        The session cookie wins over an ``Authorization: Bearer`` header.

        Args:
            req: The HTTP request.

        Returns:
            The token, or None if the request carries none.

        """
        cookies = req.get_cookie_values(self.cookie_name)
        if cookies and cookies[0]:
            return cookies[0]
        auth = req.get_header("Authorization")
        if auth and auth.lower().startswith(BEARER_PREFIX):
            return auth[len(BEARER_PREFIX) :].strip() or None
        return None

    def get_identity_for_token(self, token: str | None) -> SessionIdentity:
        """
        Resolve a token to an identity.

        Args:
            token: The session token.

        Returns:
            The identity. Unknown and expired sessions are anonymous.

        """
        if not token:
            return ANONYMOUS
        session = self.session_repository.get_by_token(token)
        if session is None:
            self.logger.debug("Unknown session token")
            return ANONYMOUS
        if session.is_expired(utc_now()):
            self.logger.debug(f"Session for user {session.user_id} has expired")
            return ANONYMOUS
        return SessionIdentity(user_id=session.user_id)

    async def get_session_identity(self, req: falcon.Request) -> SessionIdentity:
        """
        Resolve the identity behind a request.

        Storage errors are not caught here: a failed lookup is not the same as
        an anonymous request.

        Args:
            req: The HTTP request.

        Returns:
            The session identity.

        """
        return self.get_identity_for_token(self.get_token(req))
