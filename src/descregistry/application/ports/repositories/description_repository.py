"""Description repository port."""

from typing import Protocol

from descregistry.domain.entities import DescriptionRecord
from descregistry.domain.value_objects import Address


class DescriptionRepository(Protocol):
    """Port for description persistence."""

    async def get(self, account: Address) -> DescriptionRecord | None: ...

    async def save(self, record: DescriptionRecord) -> None: ...

    async def delete(self, account: Address) -> None: ...
