"""Unit of Work port - transactional boundary."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from descregistry.application.ports.repositories.description_repository import (
    DescriptionRepository,
)
from descregistry.application.ports.repositories.role_repository import RoleRepository


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def descriptions(self) -> DescriptionRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances.

    exclusive=True serializes the unit of work against every other exclusive
    one, so check-then-write sequences cannot interleave.
    """

    def __call__(self, *, exclusive: bool = False) -> AbstractAsyncContextManager[UnitOfWork]: ...
