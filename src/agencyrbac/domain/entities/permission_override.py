"""Permission override entity - per-member exception to role grants."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class PermissionOverride:
    """Explicit value for one permission key; reason is kept for audit only."""

    member_id: UUID
    permission_key: str
    value: bool
    reason: str | None = None
