"""Role membership repository port."""

from typing import Protocol

from descregistry.domain.entities import RoleGrant
from descregistry.domain.value_objects import Address, Role


class RoleRepository(Protocol):
    """Port for role membership persistence."""

    async def has_role(self, role: Role, account: Address) -> bool: ...

    async def list_for_account(self, account: Address) -> list[RoleGrant]: ...

    async def count_members(self, role: Role) -> int: ...

    async def add(self, grant: RoleGrant) -> None: ...

    async def remove(self, role: Role, account: Address) -> None: ...
