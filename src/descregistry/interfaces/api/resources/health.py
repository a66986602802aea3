"""Health check endpoints."""

import falcon.asgi

from descregistry.application.registry import DescriptionRegistry
from descregistry.domain.value_objects import ZERO_ADDRESS


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, registry: DescriptionRegistry | None = None) -> None:
        self._registry = registry

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (storage reachable)."""
        if self._registry is not None:
            await self._registry.get_description(ZERO_ADDRESS)
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
