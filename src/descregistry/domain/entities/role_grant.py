"""Role grant entity - account holds role."""

from dataclasses import dataclass
from datetime import datetime

from descregistry.domain.value_objects import Address, Role


@dataclass
class RoleGrant:
    """Membership of an account in a role."""

    role: Role
    account: Address
    granted_at: datetime
    granted_by: Address | None = None
