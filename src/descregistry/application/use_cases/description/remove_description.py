"""Remove description use case."""

import logging

from descregistry.application.access import require_role
from descregistry.application.ports import UnitOfWorkFactory
from descregistry.application.validation import validate_description_input
from descregistry.domain.exceptions import DescriptionNotFound
from descregistry.domain.value_objects import Address, Role

logger = logging.getLogger(__name__)


class RemoveDescriptionUseCase:
    """Delete an account's description, returning it to the zero fingerprint."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, caller: Address, account: Address) -> None:
        validate_description_input(account)

        async with self._uow_factory(exclusive=True) as uow:
            await require_role(uow.roles, caller, Role.REMOVE)

            existing = await uow.descriptions.get(account)
            if not existing or existing.fingerprint.is_zero:
                raise DescriptionNotFound(f"{account} has no description")

            await uow.descriptions.delete(account)

        logger.info("Description removed for %s by %s", account, caller)
