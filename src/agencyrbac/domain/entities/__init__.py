"""Domain entities."""

from agencyrbac.domain.entities.member import Member
from agencyrbac.domain.entities.permission_override import PermissionOverride
from agencyrbac.domain.entities.role import Role

__all__ = [
    "Member",
    "PermissionOverride",
    "Role",
]
