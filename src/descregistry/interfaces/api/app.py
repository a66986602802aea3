"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from descregistry.application.registry import DescriptionRegistry
from descregistry.interfaces.api.middleware.caller import CallerMiddleware
from descregistry.interfaces.api.resources.descriptions import (
    DescriptionResource,
    DescriptionsResource,
)
from descregistry.interfaces.api.resources.health import HealthResource
from descregistry.interfaces.api.resources.roles import (
    AccountRolesResource,
    RoleMemberResource,
    RoleRenounceResource,
    RolesResource,
)

logger = logging.getLogger(__name__)


async def log_exception(req, resp, ex, params) -> None:
    """Catch-all: log unexpected errors and answer 500."""
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "InternalServerError", "message": "500 Internal Server Error"}


def create_app(registry: DescriptionRegistry, middleware: list | None = None) -> App:
    """Create Falcon ASGI app with registry routes.

    CallerMiddleware is always appended after the given middleware.
    """
    app = falcon.asgi.App(middleware=[*(middleware or []), CallerMiddleware()])
    app.add_error_handler(Exception, log_exception)

    health = HealthResource(registry)
    role_member = RoleMemberResource(registry)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/roles", RolesResource(registry))
    app.add_route("/v1/roles/{role}/members/{account}", role_member)
    app.add_route("/v1/roles/{role}/renounce", RoleRenounceResource(registry))
    app.add_route("/v1/accounts/{account}/roles", AccountRolesResource(registry))
    app.add_route("/v1/descriptions", DescriptionsResource(registry))
    app.add_route("/v1/descriptions/{account}", DescriptionResource(registry))
    return app
