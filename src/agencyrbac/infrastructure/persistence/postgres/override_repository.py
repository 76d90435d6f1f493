"""PostgreSQL permission override repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from agencyrbac.domain.entities import PermissionOverride


class PostgresOverrideRepository:
    """Permission override repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_for_member(self, member_id: UUID) -> dict[str, PermissionOverride]:
        """Overrides for member keyed by permission key."""
        cur = await self._conn.execute(
            "SELECT member_id, permission_key, value, reason "
            "FROM member_permission_override WHERE member_id = %s",
            (member_id,),
        )
        rows = await cur.fetchall()
        return {
            r[1]: PermissionOverride(member_id=r[0], permission_key=r[1], value=r[2], reason=r[3])
            for r in rows
        }
