"""Member entity - one user's relationship to one agency."""

from dataclasses import dataclass
from uuid import UUID

from agencyrbac.domain.value_objects import MemberType


@dataclass(frozen=True)
class Member:
    """Agency member. ``member_type`` is None when the stored tier is unrecognised."""

    id: UUID
    user_id: UUID
    agency_id: UUID
    member_type: MemberType | None
    email: str | None = None
