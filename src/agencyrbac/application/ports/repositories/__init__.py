"""Repository ports."""

from agencyrbac.application.ports.repositories.member_repository import MemberRepository
from agencyrbac.application.ports.repositories.override_repository import (
    OverrideRepository,
)
from agencyrbac.application.ports.repositories.role_repository import RoleRepository

__all__ = [
    "MemberRepository",
    "OverrideRepository",
    "RoleRepository",
]
