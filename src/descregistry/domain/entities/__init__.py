"""Domain entities."""

from descregistry.domain.entities.description import DescriptionRecord
from descregistry.domain.entities.role_grant import RoleGrant

__all__ = [
    "DescriptionRecord",
    "RoleGrant",
]
