"""API errors rendered as ``{"error": message}`` bodies."""

import falcon


class ApiError(Exception):
    """An error with an HTTP status and a user-facing message."""

    def __init__(self, status: str, message: str) -> None:
        """
        Initialize the error.

        Args:
            status: The Falcon status line, e.g. ``falcon.HTTP_403``.
            message: The message returned to the client.

        """
        super().__init__(message)
        self.status = status
        self.message = message


async def handle_api_error(req: falcon.Request, resp: falcon.Response, ex: ApiError, params: dict) -> None:
    """Render an ApiError as a JSON error body."""
    resp.status = ex.status
    resp.media = {"error": ex.message}
