"""PostgreSQL role repository implementation."""

from collections.abc import Mapping
from uuid import UUID

import structlog
from psycopg import AsyncConnection

from agencyrbac.domain.entities import Role

logger = structlog.get_logger(__name__)


def _json_object(value: object, role_id: UUID, column: str) -> dict:
    """JSONB column as a dict; anything but an object reads as empty."""
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        logger.warning(
            "Role column is not a JSON object; ignoring it",
            role_id=str(role_id),
            column=column,
            value_type=type(value).__name__,
        )
        return {}
    return dict(value)


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_for_member(self, member_id: UUID) -> list[Role]:
        """Roles assigned to member, by position."""
        cur = await self._conn.execute(
            "SELECT r.id, r.agency_id, r.name, r.display_name, r.permissions, "
            "r.section_access, r.position, r.color, r.icon "
            "FROM member_role mr JOIN agency_role r ON r.id = mr.role_id "
            "WHERE mr.member_id = %s ORDER BY r.position, r.id",
            (member_id,),
        )
        rows = await cur.fetchall()
        return [
            Role(
                id=r[0],
                agency_id=r[1],
                name=r[2],
                display_name=r[3],
                permissions=_json_object(r[4], r[0], "permissions"),
                section_access=_json_object(r[5], r[0], "section_access"),
                position=r[6],
                color=r[7],
                icon=r[8],
            )
            for r in rows
        ]
