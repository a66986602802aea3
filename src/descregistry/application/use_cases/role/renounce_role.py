"""Renounce role use case."""

import logging

from descregistry.application.ports import UnitOfWorkFactory
from descregistry.domain.exceptions import AccessRestricted
from descregistry.domain.value_objects import Address, Role

logger = logging.getLogger(__name__)


class RenounceRoleUseCase:
    """Account gives up one of its own roles. No ADMIN needed."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, caller: Address, role: Role, account: Address) -> None:
        if account != caller:
            raise AccessRestricted("Roles can only be renounced by their holder")

        async with self._uow_factory(exclusive=True) as uow:
            if not await uow.roles.has_role(role, account):
                return
            await uow.roles.remove(role, account)
        logger.info("%s renounced %s", account, role)
