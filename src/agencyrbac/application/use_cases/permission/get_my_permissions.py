"""Get my permissions use case."""

import asyncio
from uuid import UUID

from agencyrbac.application.dto.permission_dto import MyPermissionsOutput
from agencyrbac.application.ports import PermissionResolver
from agencyrbac.domain.exceptions import PermissionDenied
from agencyrbac.domain.value_objects import Missing


class GetMyPermissionsUseCase:
    """Resolve the caller's permissions and section access in an agency."""

    def __init__(self, permission_resolver: PermissionResolver) -> None:
        self._resolver = permission_resolver

    async def execute(
        self, user_id: UUID, agency_id: UUID, email: str | None = None
    ) -> MyPermissionsOutput:
        """Caller must be a member of the agency."""
        lookup = await self._resolver.get_member_by_user_and_agency(user_id, agency_id)
        if isinstance(lookup, Missing):
            raise PermissionDenied("User is not a member of this agency")
        member = lookup.value

        permissions, section_access = await asyncio.gather(
            self._resolver.resolve_permissions(member.id, email),
            self._resolver.get_section_access(member.id, email),
        )
        return MyPermissionsOutput(
            member_id=member.id,
            member_type=member.member_type,
            permissions=permissions,
            section_access=section_access,
        )
