"""Grant role use case."""

import logging
from datetime import UTC, datetime

from descregistry.application.access import require_role
from descregistry.application.ports import UnitOfWorkFactory
from descregistry.domain.entities import RoleGrant
from descregistry.domain.value_objects import Address, Role

logger = logging.getLogger(__name__)


class GrantRoleUseCase:
    """Grant role to account. Caller must hold ADMIN."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, caller: Address, role: Role, account: Address) -> None:
        """Granting a held role is a no-op."""
        async with self._uow_factory(exclusive=True) as uow:
            await require_role(uow.roles, caller, Role.ADMIN)
            if await uow.roles.has_role(role, account):
                return
            await uow.roles.add(
                RoleGrant(
                    role=role,
                    account=account,
                    granted_at=datetime.now(UTC),
                    granted_by=caller,
                )
            )
        logger.info("Granted %s to %s by %s", role, account, caller)
