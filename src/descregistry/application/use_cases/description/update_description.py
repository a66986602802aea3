"""Update description use case."""

import logging
from datetime import UTC, datetime

from descregistry.application.access import require_role
from descregistry.application.ports import Encoder, UnitOfWorkFactory
from descregistry.application.validation import validate_description_input
from descregistry.domain.entities import DescriptionRecord
from descregistry.domain.exceptions import DescriptionNotFound
from descregistry.domain.value_objects import Address, Fingerprint, Role

logger = logging.getLogger(__name__)


class UpdateDescriptionUseCase:
    """Overwrite an existing description. Caller needs UPDATE."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        encoder: Encoder,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._encoder = encoder

    async def execute(self, caller: Address, account: Address, text: str) -> Fingerprint:
        validate_description_input(account, text)

        async with self._uow_factory(exclusive=True) as uow:
            await require_role(uow.roles, caller, Role.UPDATE)

            existing = await uow.descriptions.get(account)
            if not existing or existing.fingerprint.is_zero:
                raise DescriptionNotFound(f"{account} has no description")

            fingerprint = self._encoder.encode(text)
            await uow.descriptions.save(
                DescriptionRecord(
                    account=account,
                    fingerprint=fingerprint,
                    updated_at=datetime.now(UTC),
                    updated_by=caller,
                )
            )

        logger.info("Description updated for %s by %s", account, caller)
        return fingerprint
