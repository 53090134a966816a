"""Access logging middleware for the Falcon application."""

import logging
import time
from typing import Optional

import falcon

from pyappgate.domain.models.access import SessionIdentity
from pyappgate.utils.class_logger import LoggerMixin


def describe_requester(req: falcon.Request) -> str:
    """Name the requester as resolved by the auth middleware, if it ran."""
    identity = getattr(req.context, "identity", None)
    if not isinstance(identity, SessionIdentity):
        return "unchecked"
    return f"user {identity.user_id}" if identity.is_present else "anonymous"


class LoggingMiddleware(LoggerMixin):
    """
    Middleware writing one access log line per request.

    Installed ahead of the auth middleware so its response hook runs last and
    sees the identity and gate outcome left on ``req.context``.
    """

    async def process_request(self, req: falcon.Request, resp: falcon.Response) -> None:
        """Record when the request started."""
        req.context.start_time = time.monotonic()

    async def process_response(
        self, req: falcon.Request, resp: falcon.Response, resource: Optional[object], req_succeeded: bool
    ) -> None:
        """
        Log the outcome of the request.

        Args:
            req: The HTTP request.
            resp: The HTTP response.
            resource: The resource object, or None if no route matched.
            req_succeeded: Whether the request succeeded.

        """
        duration = time.monotonic() - getattr(req.context, "start_time", time.monotonic())
        status = resp.status_code
        line = f"{req.method} {req.path} [{describe_requester(req)}] -> {status}"
        location = resp.get_header("Location")
        if location:
            line += f" {location}"
        line += f" ({duration:.3f}s)"

        level = logging.ERROR if status >= 500 else logging.INFO
        self.logger.log(level, line)
