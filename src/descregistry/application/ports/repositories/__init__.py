"""Repository ports."""

from descregistry.application.ports.repositories.description_repository import (
    DescriptionRepository,
)
from descregistry.application.ports.repositories.role_repository import RoleRepository

__all__ = [
    "DescriptionRepository",
    "RoleRepository",
]
