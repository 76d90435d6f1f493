"""Permission override repository port."""

from typing import Protocol
from uuid import UUID

from agencyrbac.domain.entities import PermissionOverride


class OverrideRepository(Protocol):
    """Port for per-member permission overrides."""

    async def list_for_member(self, member_id: UUID) -> dict[str, PermissionOverride]:
        """Overrides keyed by permission key."""
        ...
