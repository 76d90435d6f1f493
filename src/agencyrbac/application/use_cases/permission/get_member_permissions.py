"""Get member permissions use case."""

from uuid import UUID

from agencyrbac.application.dto.permission_dto import MemberPermissionsOutput
from agencyrbac.application.ports import PermissionResolver
from agencyrbac.domain.exceptions import NotFound, PermissionDenied
from agencyrbac.domain.value_objects import Missing


class GetMemberPermissionsUseCase:
    """Resolve permissions of a member on behalf of another member of the agency."""

    def __init__(self, permission_resolver: PermissionResolver) -> None:
        self._resolver = permission_resolver

    async def execute(
        self, actor_user_id: UUID, agency_id: UUID, member_id: UUID
    ) -> MemberPermissionsOutput:
        """Actor must belong to the agency; target must belong to the same agency."""
        actor = await self._resolver.get_member_by_user_and_agency(actor_user_id, agency_id)
        if isinstance(actor, Missing):
            raise PermissionDenied("User is not a member of this agency")

        target = await self._resolver.get_member(member_id)
        if isinstance(target, Missing) or target.value.agency_id != agency_id:
            raise NotFound("Member", str(member_id))

        # the target's own email decides god mode, not the actor's
        permissions = await self._resolver.resolve_permissions(member_id)
        return MemberPermissionsOutput(member_id=member_id, permissions=permissions)
