"""Member-type tiers within an agency."""

from enum import StrEnum


class MemberType(StrEnum):
    """Coarse authority level of a member, orthogonal to roles."""

    OWNER = "owner"
    ADMIN = "admin"
    SEATED_USER = "seated_user"
