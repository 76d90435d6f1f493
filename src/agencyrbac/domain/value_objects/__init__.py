"""Domain value objects."""

from agencyrbac.domain.value_objects.god_mode import GodModePolicy
from agencyrbac.domain.value_objects.lookup import MISSING, Found, Missing
from agencyrbac.domain.value_objects.member_type import MemberType
from agencyrbac.domain.value_objects.permission_map import EMPTY_PERMISSIONS, PermissionMap

__all__ = [
    "EMPTY_PERMISSIONS",
    "Found",
    "GodModePolicy",
    "MISSING",
    "MemberType",
    "Missing",
    "PermissionMap",
]
