"""PostgreSQL member repository implementation."""

from uuid import UUID

import structlog
from psycopg import AsyncConnection

from agencyrbac.domain.entities import Member
from agencyrbac.domain.exceptions import ValidationError
from agencyrbac.domain.validation import parse_member_type
from agencyrbac.domain.value_objects import MISSING, Found, MemberType, Missing

logger = structlog.get_logger(__name__)

_SELECT_MEMBER = (
    "SELECT m.id, m.user_id, m.agency_id, m.member_type, u.email "
    "FROM agency_member m LEFT JOIN app_user u ON u.id = m.user_id "
)


def _member_type(raw: object, member_id: UUID) -> MemberType | None:
    try:
        return parse_member_type(raw)
    except ValidationError as e:
        logger.warning("Unrecognised member type", member_id=str(member_id), error=str(e))
        return None


def _row_to_member(r: tuple) -> Member:
    return Member(
        id=r[0],
        user_id=r[1],
        agency_id=r[2],
        member_type=_member_type(r[3], r[0]),
        email=r[4],
    )


class PostgresMemberRepository:
    """Member repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, member_id: UUID) -> Found[Member] | Missing:
        """Get member by id, with the linked user's email."""
        cur = await self._conn.execute(_SELECT_MEMBER + "WHERE m.id = %s", (member_id,))
        r = await cur.fetchone()
        if not r:
            return MISSING
        return Found(_row_to_member(r))

    async def get_by_user_and_agency(
        self, user_id: UUID, agency_id: UUID
    ) -> Found[Member] | Missing:
        """Get the membership of user in agency."""
        cur = await self._conn.execute(
            _SELECT_MEMBER + "WHERE m.user_id = %s AND m.agency_id = %s",
            (user_id, agency_id),
        )
        r = await cur.fetchone()
        if not r:
            return MISSING
        return Found(_row_to_member(r))
