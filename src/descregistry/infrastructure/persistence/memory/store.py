"""In-memory registry state: role membership and descriptions behind one lock."""

import asyncio

from descregistry.domain.entities import DescriptionRecord, RoleGrant
from descregistry.domain.value_objects import Address, Role


class MemoryStore:
    """Both relations of one registry, owned for the process lifetime."""

    def __init__(self) -> None:
        self.memberships: dict[Address, dict[Role, RoleGrant]] = {}
        self.descriptions: dict[Address, DescriptionRecord] = {}
        self.lock = asyncio.Lock()
