"""Lifespan middleware - opens storage and bootstraps the admin on startup."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

from descregistry.application.registry import DescriptionRegistry
from descregistry.domain.value_objects import Address

logger = logging.getLogger(__name__)


class RegistryLifespanMiddleware:
    """Open the connection pool (if any), then grant ADMIN to the deployer."""

    def __init__(
        self,
        registry: DescriptionRegistry,
        admin_address: Address | None,
        pool: AsyncConnectionPool | None = None,
    ) -> None:
        self._registry = registry
        self._admin_address = admin_address
        self._pool = pool

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        if self._pool is not None:
            await self._pool.open()
        if self._admin_address is None:
            logger.warning("No admin address configured; registry has no bootstrap admin")
            return
        await self._registry.initialize(self._admin_address)

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        if self._pool is not None:
            await self._pool.close()
