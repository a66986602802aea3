"""In-memory Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from descregistry.infrastructure.persistence.memory.description_repository import (
    MemoryDescriptionRepository,
)
from descregistry.infrastructure.persistence.memory.role_repository import (
    MemoryRoleRepository,
)
from descregistry.infrastructure.persistence.memory.store import MemoryStore


class MemoryUnitOfWork:
    """Unit of Work over a MemoryStore.

    Writes land in the store immediately; use cases run every check before
    their single write, so a failed call has nothing to undo.
    """

    def __init__(self, store: MemoryStore) -> None:
        self.roles = MemoryRoleRepository(store)
        self.descriptions = MemoryDescriptionRepository(store)

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def create_uow_factory(store: MemoryStore) -> object:
    """Create UnitOfWork factory. Exclusive units hold the store lock."""

    @asynccontextmanager
    async def factory(*, exclusive: bool = False) -> AsyncIterator[MemoryUnitOfWork]:
        uow = MemoryUnitOfWork(store)
        if not exclusive:
            yield uow
            return
        async with store.lock:
            yield uow

    return factory
