"""Description registry - the access-controlled account -> fingerprint store."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from descregistry.application.ports import Encoder, UnitOfWorkFactory
from descregistry.application.use_cases.description.add_description import (
    AddDescriptionUseCase,
)
from descregistry.application.use_cases.description.remove_description import (
    RemoveDescriptionUseCase,
)
from descregistry.application.use_cases.description.update_description import (
    UpdateDescriptionUseCase,
)
from descregistry.application.use_cases.role.grant_role import GrantRoleUseCase
from descregistry.application.use_cases.role.initialize_admin import InitializeAdminUseCase
from descregistry.application.use_cases.role.renounce_role import RenounceRoleUseCase
from descregistry.application.use_cases.role.revoke_role import RevokeRoleUseCase
from descregistry.domain.exceptions import DescRegistryError
from descregistry.domain.value_objects import ZERO_FINGERPRINT, Address, Fingerprint, Role

logger = logging.getLogger(__name__)


@contextmanager
def _log_rejection(operation: str, caller: Address) -> Iterator[None]:
    try:
        yield
    except DescRegistryError as exc:
        logger.debug("%s rejected for %s: %s", operation, caller, type(exc).__name__)
        raise


class DescriptionRegistry:
    """Role-gated registry of one description fingerprint per account.

    Mutations check, in order: input validity (zero account, empty text), the
    caller's role, then record existence. A failed check raises a
    DescRegistryError subclass and leaves state untouched. Reads are
    unrestricted.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        encoder: Encoder,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._encoder = encoder
        self._initialize = InitializeAdminUseCase(unit_of_work_factory)
        self._grant = GrantRoleUseCase(unit_of_work_factory)
        self._revoke = RevokeRoleUseCase(unit_of_work_factory)
        self._renounce = RenounceRoleUseCase(unit_of_work_factory)
        self._add = AddDescriptionUseCase(unit_of_work_factory, encoder)
        self._update = UpdateDescriptionUseCase(unit_of_work_factory, encoder)
        self._remove = RemoveDescriptionUseCase(unit_of_work_factory)

    @property
    def encoder(self) -> Encoder:
        return self._encoder

    async def initialize(self, deployer: Address) -> bool:
        """Grant ADMIN to deployer unless some account already holds it."""
        return await self._initialize.execute(deployer)

    # --- roles ---

    def role_identifier(self, role: Role) -> Fingerprint:
        """32-byte identifier of a role: the fingerprint of its wire name."""
        return self._encoder.encode(role.value)

    def resolve_role(self, text: str) -> Role:
        """Parse a role from its wire name, short name or hex identifier."""
        try:
            return Role.parse(text)
        except ValueError:
            pass
        try:
            identifier = Fingerprint.from_hex(text)
        except ValueError:
            raise ValueError(f"Unknown role: {text!r}") from None
        for role in Role:
            if self.role_identifier(role) == identifier:
                return role
        raise ValueError(f"Unknown role: {text!r}")

    async def has_role(self, role: Role, account: Address) -> bool:
        async with self._uow_factory() as uow:
            return await uow.roles.has_role(role, account)

    async def roles_of(self, account: Address) -> list[Role]:
        """Roles held by account, in declaration order."""
        async with self._uow_factory() as uow:
            grants = await uow.roles.list_for_account(account)
        held = {g.role for g in grants}
        return [role for role in Role if role in held]

    async def grant_role(self, caller: Address, role: Role, account: Address) -> None:
        with _log_rejection("grant_role", caller):
            await self._grant.execute(caller, role, account)

    async def revoke_role(self, caller: Address, role: Role, account: Address) -> None:
        with _log_rejection("revoke_role", caller):
            await self._revoke.execute(caller, role, account)

    async def renounce_role(self, caller: Address, role: Role, account: Address) -> None:
        with _log_rejection("renounce_role", caller):
            await self._renounce.execute(caller, role, account)

    # --- descriptions ---

    async def add_description(
        self, caller: Address, text: str, account: Address
    ) -> Fingerprint:
        with _log_rejection("add_description", caller):
            return await self._add.execute(caller, text, account)

    async def update_description(
        self, caller: Address, account: Address, text: str
    ) -> Fingerprint:
        with _log_rejection("update_description", caller):
            return await self._update.execute(caller, account, text)

    async def remove_description(self, caller: Address, account: Address) -> None:
        with _log_rejection("remove_description", caller):
            await self._remove.execute(caller, account)

    async def get_description(self, account: Address) -> Fingerprint:
        """Stored fingerprint, or the zero fingerprint when absent."""
        async with self._uow_factory() as uow:
            record = await uow.descriptions.get(account)
        if record is None:
            return ZERO_FINGERPRINT
        return record.fingerprint
