"""Add description use case."""

import logging
from datetime import UTC, datetime

from descregistry.application.access import require_role
from descregistry.application.ports import Encoder, UnitOfWorkFactory
from descregistry.application.validation import validate_description_input
from descregistry.domain.entities import DescriptionRecord
from descregistry.domain.exceptions import DescriptionAlreadyExists
from descregistry.domain.value_objects import Address, Fingerprint, Role

logger = logging.getLogger(__name__)


class AddDescriptionUseCase:
    """Create the description of an account: validation, ADD gate, duplicate guard."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        encoder: Encoder,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._encoder = encoder

    async def execute(self, caller: Address, text: str, account: Address) -> Fingerprint:
        """Store encode(text) for account and return the fingerprint."""
        validate_description_input(account, text)

        async with self._uow_factory(exclusive=True) as uow:
            await require_role(uow.roles, caller, Role.ADD)

            existing = await uow.descriptions.get(account)
            if existing and not existing.fingerprint.is_zero:
                raise DescriptionAlreadyExists(f"{account} already has a description")

            fingerprint = self._encoder.encode(text)
            await uow.descriptions.save(
                DescriptionRecord(
                    account=account,
                    fingerprint=fingerprint,
                    updated_at=datetime.now(UTC),
                    updated_by=caller,
                )
            )

        logger.info("Description added for %s by %s", account, caller)
        return fingerprint
