"""Role gate shared by the mutating use cases."""

from descregistry.application.ports.repositories import RoleRepository
from descregistry.domain.exceptions import AccessRestricted
from descregistry.domain.value_objects import Address, Role


async def require_role(roles: RoleRepository, caller: Address, role: Role) -> None:
    """Raise AccessRestricted unless caller holds role. ADMIN passes every gate."""
    if await roles.has_role(role, caller):
        return
    if role is not Role.ADMIN and await roles.has_role(Role.ADMIN, caller):
        return
    raise AccessRestricted(f"{caller} does not hold {role}")
