"""Permission resolver port - layered permission resolution."""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from agencyrbac.domain.entities import Member
from agencyrbac.domain.value_objects import Found, MemberType, Missing, PermissionMap


class PermissionResolver(Protocol):
    """Port for resolving what an agency member may do and see."""

    async def get_member(self, member_id: UUID) -> Found[Member] | Missing: ...

    async def get_member_by_user_and_agency(
        self, user_id: UUID, agency_id: UUID
    ) -> Found[Member] | Missing: ...

    async def resolve_permissions(
        self, member_id: UUID, user_email: str | None = None
    ) -> PermissionMap: ...

    async def resolve_permissions_by_user_and_agency(
        self, user_id: UUID, agency_id: UUID, user_email: str | None = None
    ) -> PermissionMap: ...

    async def has_permission(
        self, member_id: UUID, key: str, user_email: str | None = None
    ) -> bool: ...

    async def has_any_permission(
        self, member_id: UUID, keys: Sequence[str], user_email: str | None = None
    ) -> bool: ...

    async def has_all_permissions(
        self, member_id: UUID, keys: Sequence[str], user_email: str | None = None
    ) -> bool: ...

    async def get_section_access(
        self, member_id: UUID, user_email: str | None = None
    ) -> PermissionMap: ...

    async def get_member_type(self, user_id: UUID, agency_id: UUID) -> MemberType | None: ...

    async def can_manage_member(
        self, manager_user_id: UUID, target_member_id: UUID, agency_id: UUID
    ) -> bool: ...
