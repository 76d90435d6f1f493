"""Permission DTOs."""

from dataclasses import dataclass
from uuid import UUID

from agencyrbac.domain.value_objects import MemberType, PermissionMap


@dataclass
class MyPermissionsOutput:
    """Caller's own permissions, sections and tier within an agency."""

    member_id: UUID
    member_type: MemberType | None
    permissions: PermissionMap
    section_access: PermissionMap


@dataclass
class MemberPermissionsOutput:
    """Resolved permissions of one agency member."""

    member_id: UUID
    permissions: PermissionMap
