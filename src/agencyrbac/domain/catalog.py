"""Permission catalog - the closed set of permission keys and UI sections.

Owner and admin maps are derived from the catalog, so a key added here is
granted to both tiers without further changes.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from agencyrbac.domain.value_objects import PermissionMap


@dataclass(frozen=True)
class PermissionDefinition:
    """Catalog entry for one permission key."""

    key: str
    description: str
    category: str


CRM = "CRM"
CALENDAR = "Calendar"
MARKETING = "Marketing"
DATA = "Data"
ADMINISTRATION = "Administration"
AI_FEATURES = "AI Features"

_DEFINITIONS: tuple[PermissionDefinition, ...] = (
    # CRM
    PermissionDefinition("can_view_dashboard", "View the main dashboard", CRM),
    PermissionDefinition("can_view_leads", "View leads", CRM),
    PermissionDefinition("can_create_leads", "Create new leads", CRM),
    PermissionDefinition("can_edit_leads", "Edit existing leads", CRM),
    PermissionDefinition("can_delete_leads", "Delete leads", CRM),
    PermissionDefinition("can_view_contacts", "View contacts", CRM),
    PermissionDefinition("can_create_contacts", "Create new contacts", CRM),
    PermissionDefinition("can_edit_contacts", "Edit existing contacts", CRM),
    PermissionDefinition("can_delete_contacts", "Delete contacts", CRM),
    PermissionDefinition("can_view_opportunities", "View opportunities/deals", CRM),
    PermissionDefinition("can_create_opportunities", "Create new opportunities", CRM),
    PermissionDefinition("can_edit_opportunities", "Edit existing opportunities", CRM),
    PermissionDefinition("can_delete_opportunities", "Delete opportunities", CRM),
    PermissionDefinition("can_view_activities", "View activities", CRM),
    PermissionDefinition("can_create_activities", "Create new activities", CRM),
    PermissionDefinition("can_edit_activities", "Edit existing activities", CRM),
    # Calendar & meetings
    PermissionDefinition("can_view_calendar", "View calendar", CALENDAR),
    PermissionDefinition("can_manage_calendar", "Manage calendar events", CALENDAR),
    PermissionDefinition("can_view_meetings", "View meetings", CALENDAR),
    PermissionDefinition("can_manage_meetings", "Schedule and manage meetings", CALENDAR),
    # Marketing
    PermissionDefinition("can_view_forms", "View forms", MARKETING),
    PermissionDefinition("can_manage_forms", "Create and manage forms", MARKETING),
    PermissionDefinition("can_view_campaigns", "View email campaigns", MARKETING),
    PermissionDefinition("can_manage_campaigns", "Create and manage campaigns", MARKETING),
    PermissionDefinition("can_view_workflows", "View automation workflows", MARKETING),
    PermissionDefinition("can_manage_workflows", "Create and manage workflows", MARKETING),
    # Data
    PermissionDefinition("can_view_reports", "View reports and analytics", DATA),
    PermissionDefinition("can_export_data", "Export data", DATA),
    PermissionDefinition("can_import_data", "Import data", DATA),
    # Administration
    PermissionDefinition("can_manage_team", "Invite and manage team members", ADMINISTRATION),
    PermissionDefinition("can_manage_roles", "Create and manage roles", ADMINISTRATION),
    PermissionDefinition("can_manage_billing", "Manage billing and subscription", ADMINISTRATION),
    PermissionDefinition("can_manage_agency_settings", "Manage agency settings", ADMINISTRATION),
    PermissionDefinition("can_access_api", "Access API", ADMINISTRATION),
    PermissionDefinition("can_manage_integrations", "Manage integrations", ADMINISTRATION),
    # AI features
    PermissionDefinition("can_view_second_brain", "View Second Brain", AI_FEATURES),
    PermissionDefinition("can_manage_second_brain", "Manage Second Brain content", AI_FEATURES),
)

ALL_PERMISSIONS: Mapping[str, PermissionDefinition] = MappingProxyType(
    {d.key: d for d in _DEFINITIONS}
)


def _group_by_category() -> dict[str, tuple[str, ...]]:
    grouped: dict[str, list[str]] = {}
    for definition in ALL_PERMISSIONS.values():
        grouped.setdefault(definition.category, []).append(definition.key)
    return {category: tuple(keys) for category, keys in grouped.items()}


PERMISSION_CATEGORIES: Mapping[str, tuple[str, ...]] = MappingProxyType(_group_by_category())

BILLING_PERMISSION = "can_manage_billing"

OWNER_PERMISSIONS = PermissionMap({key: True for key in ALL_PERMISSIONS})
ADMIN_PERMISSIONS = PermissionMap({key: key != BILLING_PERMISSION for key in ALL_PERMISSIONS})

ALL_SECTIONS: tuple[str, ...] = (
    "dashboard",
    "leads",
    "contacts",
    "opportunities",
    "activities",
    "calendar",
    "meetings",
    "forms",
    "campaigns",
    "workflows",
    "reports",
    "settings",
    "second_brain",
)

FULL_SECTION_ACCESS = PermissionMap({section: True for section in ALL_SECTIONS})


def is_known_permission(key: str) -> bool:
    return key in ALL_PERMISSIONS


def is_known_section(section: str) -> bool:
    return section in ALL_SECTIONS


def permissions_in_category(category: str) -> tuple[str, ...]:
    """Keys in a category; empty tuple for an unknown category."""
    return PERMISSION_CATEGORIES.get(category, ())
