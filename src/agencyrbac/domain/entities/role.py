"""Role entity - named bundle of permission and section grants."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class Role:
    """Agency role. Color and icon are presentation only."""

    id: UUID
    agency_id: UUID
    name: str
    display_name: str
    permissions: dict[str, bool] = field(default_factory=dict)
    section_access: dict[str, bool] = field(default_factory=dict)
    position: int = 0
    color: str | None = None
    icon: str | None = None
