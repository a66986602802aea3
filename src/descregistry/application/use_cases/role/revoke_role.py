"""Revoke role use case."""

import logging

from descregistry.application.access import require_role
from descregistry.application.ports import UnitOfWorkFactory
from descregistry.domain.value_objects import Address, Role

logger = logging.getLogger(__name__)


class RevokeRoleUseCase:
    """Revoke role from account. Caller must hold ADMIN."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, caller: Address, role: Role, account: Address) -> None:
        """Revoking an unheld role is a no-op."""
        async with self._uow_factory(exclusive=True) as uow:
            await require_role(uow.roles, caller, Role.ADMIN)
            if not await uow.roles.has_role(role, account):
                return
            await uow.roles.remove(role, account)
        logger.info("Revoked %s from %s by %s", role, account, caller)
