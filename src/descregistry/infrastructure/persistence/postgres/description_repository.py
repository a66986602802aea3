"""PostgreSQL description repository implementation."""

from psycopg import AsyncConnection

from descregistry.domain.entities import DescriptionRecord
from descregistry.domain.value_objects import Address, Fingerprint


class PostgresDescriptionRepository:
    """Description repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, account: Address) -> DescriptionRecord | None:
        """Get description by account."""
        cur = await self._conn.execute(
            "SELECT account, fingerprint, updated_at, updated_by "
            "FROM description WHERE account = %s",
            (account.value,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return DescriptionRecord(
            account=Address(bytes(r[0])),
            fingerprint=Fingerprint(bytes(r[1])),
            updated_at=r[2],
            updated_by=Address(bytes(r[3])) if r[3] is not None else None,
        )

    async def save(self, record: DescriptionRecord) -> None:
        """Insert or overwrite the account's description."""
        await self._conn.execute(
            "INSERT INTO description (account, fingerprint, updated_at, updated_by) "
            "VALUES (%s, %s, %s, %s) "
            "ON CONFLICT (account) DO UPDATE SET fingerprint = EXCLUDED.fingerprint, "
            "updated_at = EXCLUDED.updated_at, updated_by = EXCLUDED.updated_by",
            (
                record.account.value,
                record.fingerprint.value,
                record.updated_at,
                record.updated_by.value if record.updated_by else None,
            ),
        )

    async def delete(self, account: Address) -> None:
        await self._conn.execute(
            "DELETE FROM description WHERE account = %s",
            (account.value,),
        )
