"""In-memory role membership repository."""

from descregistry.domain.entities import RoleGrant
from descregistry.domain.value_objects import Address, Role
from descregistry.infrastructure.persistence.memory.store import MemoryStore


class MemoryRoleRepository:
    """Role membership as account -> {role: grant}."""

    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    async def has_role(self, role: Role, account: Address) -> bool:
        return role in self._store.memberships.get(account, {})

    async def list_for_account(self, account: Address) -> list[RoleGrant]:
        return list(self._store.memberships.get(account, {}).values())

    async def count_members(self, role: Role) -> int:
        return sum(1 for roles in self._store.memberships.values() if role in roles)

    async def add(self, grant: RoleGrant) -> None:
        self._store.memberships.setdefault(grant.account, {})[grant.role] = grant

    async def remove(self, role: Role, account: Address) -> None:
        roles = self._store.memberships.get(account)
        if roles is None:
            return
        roles.pop(role, None)
        if not roles:
            del self._store.memberships[account]
