"""In-memory description repository."""

from descregistry.domain.entities import DescriptionRecord
from descregistry.domain.value_objects import Address
from descregistry.infrastructure.persistence.memory.store import MemoryStore


class MemoryDescriptionRepository:
    """Descriptions keyed by account."""

    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    async def get(self, account: Address) -> DescriptionRecord | None:
        return self._store.descriptions.get(account)

    async def save(self, record: DescriptionRecord) -> None:
        self._store.descriptions[record.account] = record

    async def delete(self, account: Address) -> None:
        self._store.descriptions.pop(account, None)
