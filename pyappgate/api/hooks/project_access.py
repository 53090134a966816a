"""Falcon hook restricting a resource to members of the project in the URL."""

from collections.abc import Iterable

import falcon

from pyappgate.api.errors import ApiError
from pyappgate.domain.models.access import SessionIdentity
from pyappgate.utils.class_logger import LoggerMixin


class ProjectAccess(LoggerMixin):
    """
    Before hook for project-scoped resources.

    The decorated resource must expose ``session_service`` and
    ``project_service`` attributes. The project ID is read from the
    ``project_id`` route parameter.
    """

    def __init__(self, allowed_methods: Iterable[str]) -> None:
        """
        Initialize the hook.

        Args:
            allowed_methods: HTTP methods the resource accepts.

        """
        self.allowed_methods = frozenset(method.upper() for method in allowed_methods)

    async def __call__(self, req: falcon.Request, resp: falcon.Response, resource: object, params: dict) -> None:
        """
        Check method, session and project membership.

        Raises:
            ApiError: 400 for a disallowed method, 401 without a session,
                403 when the user is not a member of the project.

        """
        if req.method not in self.allowed_methods:
            raise ApiError(falcon.HTTP_400, "Method not allowed.")

        identity = getattr(req.context, "identity", None)
        if not isinstance(identity, SessionIdentity):
            identity = await resource.session_service.get_session_identity(req)
            req.context.identity = identity
        if not identity.is_present:
            raise ApiError(falcon.HTTP_401, "Please sign in to access this resource.")

        project_id = params.get("project_id")
        if not resource.project_service.has_access(project_id, identity):
            raise ApiError(falcon.HTTP_403, "Project not accessible by current user.")
