"""Initialize admin use case - bootstrap the first ADMIN holder."""

import logging
from datetime import UTC, datetime

from descregistry.application.ports import UnitOfWorkFactory
from descregistry.domain.entities import RoleGrant
from descregistry.domain.exceptions import AddressZeroNotAllowed
from descregistry.domain.value_objects import Address, Role

logger = logging.getLogger(__name__)


class InitializeAdminUseCase:
    """Grant ADMIN to the deployer while nobody holds it."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, deployer: Address) -> bool:
        """Return True if ADMIN was granted, False if an admin already exists."""
        if deployer.is_zero:
            raise AddressZeroNotAllowed("Deployer cannot be the zero address")

        async with self._uow_factory(exclusive=True) as uow:
            if await uow.roles.count_members(Role.ADMIN) > 0:
                return False
            await uow.roles.add(
                RoleGrant(role=Role.ADMIN, account=deployer, granted_at=datetime.now(UTC))
            )
        logger.info("Registry initialized with admin %s", deployer)
        return True
