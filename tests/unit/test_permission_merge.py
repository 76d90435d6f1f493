"""Unit tests for role merge and override application."""

from itertools import permutations
from uuid import uuid4

from agencyrbac.domain.entities import PermissionOverride
from agencyrbac.domain.permission_merge import (
    apply_overrides,
    merge_role_permissions,
    merge_section_access,
)

from tests.conftest import make_role


def _override(key: str, value: bool) -> PermissionOverride:
    return PermissionOverride(member_id=uuid4(), permission_key=key, value=value)


def test_no_roles_merge_to_empty_map() -> None:
    assert merge_role_permissions([]).to_dict() == {}


def test_grant_from_any_role_wins() -> None:
    """A True in one role survives a False in another."""
    sales = make_role({"can_view_leads": True, "can_edit_leads": True})
    viewer = make_role({"can_view_leads": True, "can_edit_leads": False})
    merged = merge_role_permissions([sales, viewer])
    assert merged.to_dict() == {"can_view_leads": True, "can_edit_leads": True}


def test_false_only_fills_unset_keys() -> None:
    role = make_role({"can_delete_leads": False})
    merged = merge_role_permissions([role])
    assert "can_delete_leads" in merged
    assert merged["can_delete_leads"] is False


def test_keys_no_role_mentions_stay_absent() -> None:
    merged = merge_role_permissions([make_role({"can_view_leads": True})])
    assert "can_export_data" not in merged
    assert merged["can_export_data"] is False


def test_non_true_values_count_as_false() -> None:
    role = make_role({"can_view_leads": "yes", "can_edit_leads": 1})
    merged = merge_role_permissions([role])
    assert merged.to_dict() == {"can_view_leads": False, "can_edit_leads": False}


def test_merge_is_order_independent() -> None:
    roles = [
        make_role({"can_view_leads": True, "can_edit_leads": False}),
        make_role({"can_edit_leads": True, "can_export_data": False}),
        make_role({"can_export_data": False, "can_view_reports": True}),
    ]
    results = {merge_role_permissions(order) for order in permutations(roles)}
    assert len(results) == 1


def test_override_revokes_role_grant() -> None:
    merged = merge_role_permissions([make_role({"can_delete_leads": True})])
    result = apply_overrides(merged, {"can_delete_leads": _override("can_delete_leads", False)})
    assert result["can_delete_leads"] is False


def test_override_grants_what_roles_do_not() -> None:
    merged = merge_role_permissions([make_role({"can_view_leads": True})])
    result = apply_overrides(merged, {"can_export_data": _override("can_export_data", True)})
    assert result.to_dict() == {"can_view_leads": True, "can_export_data": True}


def test_no_overrides_leave_merge_unchanged() -> None:
    merged = merge_role_permissions([make_role({"can_view_leads": True})])
    assert apply_overrides(merged, {}) == merged


def test_section_access_records_granted_sections_only() -> None:
    roles = [
        make_role(section_access={"leads": True, "reports": False}),
        make_role(section_access={"calendar": True, "leads": False}),
    ]
    assert merge_section_access(roles).to_dict() == {"leads": True, "calendar": True}


def test_section_access_without_roles_is_empty() -> None:
    assert merge_section_access([]).to_dict() == {}
