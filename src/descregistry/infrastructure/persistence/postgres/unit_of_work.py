"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from descregistry.infrastructure.persistence.postgres.description_repository import (
    PostgresDescriptionRepository,
)
from descregistry.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)

# Advisory lock key serializing registry writers across connections.
REGISTRY_LOCK_KEY = 0x64657363


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool, exclusive: bool = False) -> None:
        self._pool = pool
        self._exclusive = exclusive
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        if self._exclusive:
            await self._conn.execute("SELECT pg_advisory_xact_lock(%s)", (REGISTRY_LOCK_KEY,))
        self._roles = PostgresRoleRepository(self._conn)
        self._descriptions = PostgresDescriptionRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def descriptions(self) -> PostgresDescriptionRepository:
        return self._descriptions

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory(*, exclusive: bool = False) -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool, exclusive=exclusive)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
