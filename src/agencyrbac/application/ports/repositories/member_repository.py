"""Member repository port."""

from typing import Protocol
from uuid import UUID

from agencyrbac.domain.entities import Member
from agencyrbac.domain.value_objects import Found, Missing


class MemberRepository(Protocol):
    """Port for agency membership lookups."""

    async def get_by_id(self, member_id: UUID) -> Found[Member] | Missing: ...

    async def get_by_user_and_agency(
        self, user_id: UUID, agency_id: UUID
    ) -> Found[Member] | Missing: ...
