"""Falcon resources for project insights."""

import falcon

from pyappgate.api.hooks.project_access import ProjectAccess
from pyappgate.domain.services.insights_service import InsightsService
from pyappgate.domain.services.project_service import ProjectService
from pyappgate.domain.services.session_service import SessionService
from pyappgate.utils.class_logger import LoggerMixin
from pyappgate.utils.params import safe_parse_int

ALLOWED_METHODS = ["GET"]
MAX_QUERIES_PER_PAGE = 50


@falcon.before(ProjectAccess(ALLOWED_METHODS))
class QueriesResource(LoggerMixin):
    """Resource listing the prompts submitted to a project, one page at a time."""

    def __init__(
        self,
        insights_service: InsightsService,
        session_service: SessionService,
        project_service: ProjectService,
    ) -> None:
        """
        Initialize the resource.

        Args:
            insights_service: Service reading query statistics.
            session_service: Service resolving the requester's session.
            project_service: Service checking project membership.

        """
        self.insights_service = insights_service
        self.session_service = session_service
        self.project_service = project_service

    async def on_get(self, req: falcon.Request, resp: falcon.Response, project_id: str) -> None:
        """
        Handle GET requests for a page of prompt queries.

        Args:
            req: The HTTP request.
            resp: The HTTP response.
            project_id: The project ID.

        """
        limit = max(1, min(safe_parse_int(req.get_param("limit"), MAX_QUERIES_PER_PAGE), MAX_QUERIES_PER_PAGE))
        page = max(0, safe_parse_int(req.get_param("page"), 0))

        queries, error = self.insights_service.get_query_stats(
            project_id,
            req.get_param("from"),
            req.get_param("to"),
            limit=limit,
            page=page,
        )

        if error:
            resp.status = falcon.HTTP_400
            resp.media = {"error": error.message}
            return

        if queries is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "No results found."}
            return

        resp.status = falcon.HTTP_200
        resp.media = {"queries": [query.to_dict() for query in queries]}

    async def on_post(self, req: falcon.Request, resp: falcon.Response, project_id: str) -> None:
        """Reject anything but GET."""
        resp.status = falcon.HTTP_400

    on_put = on_post
    on_patch = on_post
    on_delete = on_post
    on_head = on_post
    on_options = on_post
