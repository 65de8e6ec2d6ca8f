"""Falcon ASGI application."""

import falcon
import falcon.asgi
import structlog
from falcon.asgi import App

from pageaccess.interfaces.api.resources.access_overrides import AccessOverridesResource
from pageaccess.interfaces.api.resources.health import HealthResource

logger = structlog.get_logger()

ACCESS_OVERRIDES_ROUTES = (
    "/v1/admin-access-overrides",
    "/functions/v1/admin-access-overrides",
)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Last-resort handler for errors raised outside a resource's own handling."""
    logger.error("unhandled_exception", path=req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "internal_server_error"}


def create_app(
    access_overrides_resource: AccessOverridesResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    for route in ACCESS_OVERRIDES_ROUTES:
        app.add_route(route, access_overrides_resource)
    return app
