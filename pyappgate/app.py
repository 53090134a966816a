"""Main application entry point for the pyappgate server."""

import logging
import os
import sys

import click
import falcon.asgi
from falcon.asgi import App
from uvicorn.main import main as uvicorn_main

from pyappgate.api.errors import ApiError, handle_api_error
from pyappgate.api.middleware.auth import AuthMiddleware
from pyappgate.api.middleware.logging import LoggingMiddleware
from pyappgate.api.paths import PUBLIC_NON_ROUTED_API_PATHS
from pyappgate.api.resources.insights import QueriesResource
from pyappgate.config import Config, get_config
from pyappgate.domain.services.service_provider import ServiceProvider
from pyappgate.utils.class_logger import configure_logging, level_from_name

logger = logging.getLogger("pyappgate.app")


def create_app(config: Config | None = None, service_provider: ServiceProvider | None = None) -> App:
    """
    Create and configure the Falcon application.

    Args:
        config: Application configuration. Read from the environment when omitted.
        service_provider: Shared services. The process-wide provider is used when omitted.

    Returns:
        The ASGI application.

    """
    config = config or get_config()
    service_provider = service_provider or ServiceProvider.get_instance(config)

    middleware = [
        LoggingMiddleware(),
    ]

    if config.auth_enabled:
        middleware.append(AuthMiddleware(service_provider.session_service, gate=service_provider.access_gate))
    else:
        logger.warning("Authentication is disabled, pages are served without a session check")

    app = falcon.asgi.App(middleware=middleware)
    app.add_error_handler(ApiError, handle_api_error)

    queries_resource = QueriesResource(
        insights_service=service_provider.insights_service,
        session_service=service_provider.session_service,
        project_service=service_provider.project_service,
    )

    app.add_route("/api/project/{project_id}/insights/queries", queries_resource)

    # Served by other handlers, but reachable without a session
    logger.info(f"Public non-routed API paths: {', '.join(PUBLIC_NON_ROUTED_API_PATHS)}")

    return app


@click.command(add_help_option=False, context_settings={"ignore_unknown_options": True})
@click.option(
    "--database-uri",
    help="Database connection URI. [default: sqlite:///appgate.db]",
    default=None,
)
@click.option(
    "--auth/--no-auth",
    help="Enable or disable authentication. [default: enabled]",
    default=None,
)
@click.argument("uvicorn_args", nargs=-1, type=click.UNPROCESSED)
def main(
    database_uri: str | None,
    auth: bool | None,
    uvicorn_args: tuple[str, ...],
) -> None:
    """
    Access-gated web application server.

    This command wraps Uvicorn and accepts all Uvicorn CLI options.
    Run with --help to see all available options.
    """
    config = get_config()
    configure_logging(level=level_from_name(config.log_level))
    # Command-line options override the environment
    if database_uri is not None:
        os.environ["PYAPPGATE_DATABASE_URI"] = database_uri
    if auth is not None:
        os.environ["PYAPPGATE_AUTH_ENABLED"] = str(auth).lower()

    args = ["uvicorn", "--factory", "pyappgate.app:create_app", *uvicorn_args]
    if "--host" not in args:
        args += ["--host", config.host]
    if "--port" not in args:
        args += ["--port", str(config.port)]

    if "--help" in args:
        sys.argv = ["uvicorn", "--help"]
        try:
            uvicorn_main()
        except SystemExit:
            pass

        click.echo("\nPyAppGate specific options:")
        click.echo("  --database-uri TEXT     Database connection URI. [default: sqlite:///appgate.db]")
        click.echo("  --auth / --no-auth      Enable or disable authentication. [default: enabled]")
        sys.exit(0)

    sys.argv = args
    uvicorn_main()


if __name__ == "__main__":
    main()
