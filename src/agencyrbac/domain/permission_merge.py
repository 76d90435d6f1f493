"""Permission merge engine - pure functions over roles and overrides."""

from collections.abc import Iterable, Mapping

from agencyrbac.domain.entities import PermissionOverride, Role
from agencyrbac.domain.value_objects import EMPTY_PERMISSIONS, PermissionMap


def merge_role_permissions(roles: Iterable[Role]) -> PermissionMap:
    """Merge role permission maps, most permissive wins.

    Any role granting a key makes it True. A False (or non-True) value only
    fills a key no earlier role has set. Keys no role mentions stay absent.
    The result does not depend on role order.
    """
    merged = EMPTY_PERMISSIONS
    for role in roles:
        merged = merged.union_most_permissive(
            {key: value is True for key, value in (role.permissions or {}).items()}
        )
    return merged


def apply_overrides(
    merged: PermissionMap, overrides: Mapping[str, PermissionOverride]
) -> PermissionMap:
    """Apply per-member overrides. An override always replaces the role value."""
    return merged.with_overrides(
        {key: override.value for key, override in overrides.items()}
    )


def merge_section_access(roles: Iterable[Role]) -> PermissionMap:
    """Union of sections granted by any role. Only granted sections are recorded."""
    granted: dict[str, bool] = {}
    for role in roles:
        for section, value in (role.section_access or {}).items():
            if value is True:
                granted[section] = True
    return PermissionMap(granted)
