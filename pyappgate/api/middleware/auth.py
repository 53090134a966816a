"""Authentication middleware for the Falcon application."""

import falcon

from pyappgate.domain.services.access_gate import AccessGate
from pyappgate.domain.services.session_service import SessionService
from pyappgate.utils.class_logger import LoggerMixin


class AuthMiddleware(LoggerMixin):
    """Middleware gating pages and API routes behind a session."""

    def __init__(self, session_service: SessionService, gate: AccessGate | None = None) -> None:
        """
        Initialize the middleware.

        Args:
            session_service: Resolves the session identity of a request.
            gate: The access gate. Defaults to one built from the standard allow-list.

        """
        self.session_service = session_service
        self.gate = gate or AccessGate()

    async def process_request(self, req: falcon.Request, resp: falcon.Response) -> None:
        """
        Process the request before routing it.

        Args:
            req: The HTTP request.
            resp: The HTTP response.

        Raises:
            falcon.HTTPTemporaryRedirect: When the gate sends the client elsewhere.

        """
        identity = await self.session_service.get_session_identity(req)
        req.context.identity = identity
        self.logger.debug(f"Session for {req.path}: {'user ' + identity.user_id if identity.is_present else 'anonymous'}")

        decision = self.gate.decide(req.path, identity)
        if decision.is_redirect:
            location = f"{req.prefix}{decision.target}"
            self.logger.info(f"Redirecting {req.method} {req.path} -> {decision.target}")
            raise falcon.HTTPTemporaryRedirect(location)
