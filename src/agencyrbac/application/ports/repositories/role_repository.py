"""Role repository port."""

from typing import Protocol
from uuid import UUID

from agencyrbac.domain.entities import Role


class RoleRepository(Protocol):
    """Port for roles assigned to members."""

    async def list_for_member(self, member_id: UUID) -> list[Role]:
        """Roles assigned to member, ordered by position ascending."""
        ...
