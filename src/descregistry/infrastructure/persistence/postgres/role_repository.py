"""PostgreSQL role membership repository implementation."""

from psycopg import AsyncConnection

from descregistry.domain.entities import RoleGrant
from descregistry.domain.value_objects import Address, Role


def _grant_from_row(r: tuple) -> RoleGrant:
    return RoleGrant(
        role=Role(r[0]),
        account=Address(bytes(r[1])),
        granted_at=r[2],
        granted_by=Address(bytes(r[3])) if r[3] is not None else None,
    )


class PostgresRoleRepository:
    """Role membership repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def has_role(self, role: Role, account: Address) -> bool:
        cur = await self._conn.execute(
            "SELECT 1 FROM role_membership WHERE role = %s AND account = %s",
            (role.value, account.value),
        )
        return await cur.fetchone() is not None

    async def list_for_account(self, account: Address) -> list[RoleGrant]:
        """List grants held by account."""
        cur = await self._conn.execute(
            "SELECT role, account, granted_at, granted_by "
            "FROM role_membership WHERE account = %s",
            (account.value,),
        )
        rows = await cur.fetchall()
        return [_grant_from_row(r) for r in rows]

    async def count_members(self, role: Role) -> int:
        cur = await self._conn.execute(
            "SELECT count(*) FROM role_membership WHERE role = %s",
            (role.value,),
        )
        r = await cur.fetchone()
        return r[0]

    async def add(self, grant: RoleGrant) -> None:
        await self._conn.execute(
            "INSERT INTO role_membership (role, account, granted_at, granted_by) "
            "VALUES (%s, %s, %s, %s) ON CONFLICT (role, account) DO NOTHING",
            (
                grant.role.value,
                grant.account.value,
                grant.granted_at,
                grant.granted_by.value if grant.granted_by else None,
            ),
        )

    async def remove(self, role: Role, account: Address) -> None:
        await self._conn.execute(
            "DELETE FROM role_membership WHERE role = %s AND account = %s",
            (role.value, account.value),
        )
