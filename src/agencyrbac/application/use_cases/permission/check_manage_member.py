"""Check manage member use case."""

from uuid import UUID

from agencyrbac.application.ports import PermissionResolver
from agencyrbac.domain.exceptions import PermissionDenied
from agencyrbac.domain.value_objects import Missing


class CheckManageMemberUseCase:
    """Tell an agency member whether they may administer another member."""

    def __init__(self, permission_resolver: PermissionResolver) -> None:
        self._resolver = permission_resolver

    async def execute(self, actor_user_id: UUID, agency_id: UUID, member_id: UUID) -> bool:
        actor = await self._resolver.get_member_by_user_and_agency(actor_user_id, agency_id)
        if isinstance(actor, Missing):
            raise PermissionDenied("User is not a member of this agency")
        return await self._resolver.can_manage_member(actor_user_id, member_id, agency_id)
