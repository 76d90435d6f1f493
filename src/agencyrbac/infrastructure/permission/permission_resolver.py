"""Permission resolver implementation - layered, fail-closed resolution.

Resolution order for a member:

1. God-mode email (given by the caller, or the member's own) -> every permission.
2. Owner tier -> every permission.
3. Admin tier -> every permission except billing.
4. Seated user -> roles merged most-permissive-wins, then overrides (always win).

Store failures and missing members resolve to "no permissions"; nothing here
raises to the caller.
"""

import asyncio
import dataclasses
from collections.abc import Mapping, Sequence
from enum import Enum
from uuid import UUID

import structlog

from agencyrbac.application.ports import UnitOfWorkFactory
from agencyrbac.domain.catalog import (
    ADMIN_PERMISSIONS,
    FULL_SECTION_ACCESS,
    OWNER_PERMISSIONS,
)
from agencyrbac.domain.entities import Member, PermissionOverride, Role
from agencyrbac.domain.exceptions import LookupFailed
from agencyrbac.domain.hierarchy import may_manage
from agencyrbac.domain.permission_merge import (
    apply_overrides,
    merge_role_permissions,
    merge_section_access,
)
from agencyrbac.domain.validation import clean_permission_map, clean_section_access
from agencyrbac.domain.value_objects import (
    EMPTY_PERMISSIONS,
    Found,
    GodModePolicy,
    MemberType,
    Missing,
    PermissionMap,
)

logger = structlog.get_logger(__name__)


class _Standing(Enum):
    GOD_MODE = "god_mode"
    OWNER = "owner"
    ADMIN = "admin"
    SEATED = "seated"


class AgencyPermissionResolver:
    """Resolves member permissions and section access against the store."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        god_mode: GodModePolicy | None = None,
        strict_permission_keys: bool = True,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._god_mode = god_mode or GodModePolicy()
        self._strict = strict_permission_keys

    def is_god_mode_user(self, email: str | None) -> bool:
        return self._god_mode.matches(email)

    # --- lookups ---

    async def get_member(self, member_id: UUID) -> Found[Member] | Missing:
        """Member by id; a store failure reads as Missing."""
        try:
            async with self._uow_factory() as uow:
                return await uow.members.get_by_id(member_id)
        except LookupFailed as e:
            logger.warning("Member lookup failed", member_id=str(member_id), error=str(e))
            return Missing(reason="lookup failed")
        except Exception:
            logger.exception("Unexpected error in member lookup", member_id=str(member_id))
            return Missing(reason="lookup failed")

    async def get_member_by_user_and_agency(
        self, user_id: UUID, agency_id: UUID
    ) -> Found[Member] | Missing:
        try:
            async with self._uow_factory() as uow:
                return await uow.members.get_by_user_and_agency(user_id, agency_id)
        except LookupFailed as e:
            logger.warning(
                "Member lookup failed",
                user_id=str(user_id),
                agency_id=str(agency_id),
                error=str(e),
            )
            return Missing(reason="lookup failed")
        except Exception:
            logger.exception(
                "Unexpected error in member lookup",
                user_id=str(user_id),
                agency_id=str(agency_id),
            )
            return Missing(reason="lookup failed")

    async def _load_roles(self, member_id: UUID) -> list[Role]:
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_for_member(member_id)
        return sorted(roles, key=lambda r: r.position)

    async def _load_overrides(self, member_id: UUID) -> dict[str, PermissionOverride]:
        async with self._uow_factory() as uow:
            return await uow.overrides.list_for_member(member_id)

    # --- key hygiene ---

    def _known_role_permissions(self, roles: list[Role]) -> list[Role]:
        if not self._strict:
            return roles
        cleaned_roles = []
        for role in roles:
            cleaned = clean_permission_map(role.permissions)
            if cleaned.warnings:
                logger.warning(
                    "Cleaned permission keys on role",
                    role_id=str(role.id),
                    dropped=cleaned.dropped,
                    warnings=cleaned.warnings,
                )
            cleaned_roles.append(dataclasses.replace(role, permissions=cleaned.values))
        return cleaned_roles

    def _known_role_sections(self, roles: list[Role]) -> list[Role]:
        if not self._strict:
            return roles
        cleaned_roles = []
        for role in roles:
            cleaned = clean_section_access(role.section_access)
            if cleaned.warnings:
                logger.warning(
                    "Cleaned sections on role",
                    role_id=str(role.id),
                    dropped=cleaned.dropped,
                    warnings=cleaned.warnings,
                )
            cleaned_roles.append(dataclasses.replace(role, section_access=cleaned.values))
        return cleaned_roles

    def _known_overrides(
        self, member_id: UUID, overrides: Mapping[str, PermissionOverride]
    ) -> Mapping[str, PermissionOverride]:
        if not self._strict:
            return overrides
        cleaned = clean_permission_map({k: o.value for k, o in overrides.items()})
        if cleaned.warnings:
            logger.warning(
                "Cleaned override keys",
                member_id=str(member_id),
                dropped=cleaned.dropped,
                warnings=cleaned.warnings,
            )
        return {
            k: dataclasses.replace(o, value=cleaned.values[k])
            for k, o in overrides.items()
            if k in cleaned.values
        }

    # --- resolution ---

    def _standing(self, member: Member) -> _Standing:
        if self._god_mode.matches(member.email):
            return _Standing.GOD_MODE
        if member.member_type is MemberType.OWNER:
            return _Standing.OWNER
        if member.member_type is MemberType.ADMIN:
            return _Standing.ADMIN
        return _Standing.SEATED

    async def _permissions_for(self, member: Member) -> PermissionMap:
        standing = self._standing(member)
        if standing in (_Standing.GOD_MODE, _Standing.OWNER):
            return OWNER_PERMISSIONS
        if standing is _Standing.ADMIN:
            return ADMIN_PERMISSIONS

        try:
            roles, overrides = await asyncio.gather(
                self._load_roles(member.id),
                self._load_overrides(member.id),
            )
        except LookupFailed as e:
            logger.warning(
                "Role or override lookup failed", member_id=str(member.id), error=str(e)
            )
            return EMPTY_PERMISSIONS

        merged = merge_role_permissions(self._known_role_permissions(roles))
        return apply_overrides(merged, self._known_overrides(member.id, overrides))

    async def _resolve(self, member_id: UUID) -> PermissionMap:
        lookup = await self.get_member(member_id)
        if isinstance(lookup, Missing):
            logger.warning("Member not found", member_id=str(member_id), reason=lookup.reason)
            return EMPTY_PERMISSIONS
        return await self._permissions_for(lookup.value)

    async def resolve_permissions(
        self, member_id: UUID, user_email: str | None = None
    ) -> PermissionMap:
        """Resolve the full permission map for a member. Never raises."""
        if self._god_mode.matches(user_email):
            logger.debug("God mode bypass", member_id=str(member_id))
            return OWNER_PERMISSIONS
        try:
            return await self._resolve(member_id)
        except Exception:
            logger.exception("Permission resolution failed", member_id=str(member_id))
            return EMPTY_PERMISSIONS

    async def _resolve_membership(
        self, user_id: UUID, agency_id: UUID, user_email: str | None
    ) -> PermissionMap:
        lookup = await self.get_member_by_user_and_agency(user_id, agency_id)
        if isinstance(lookup, Missing):
            logger.warning(
                "Member not found for user in agency",
                user_id=str(user_id),
                agency_id=str(agency_id),
            )
            return EMPTY_PERMISSIONS
        if self._god_mode.matches(user_email):
            return OWNER_PERMISSIONS
        return await self._permissions_for(lookup.value)

    async def resolve_permissions_by_user_and_agency(
        self, user_id: UUID, agency_id: UUID, user_email: str | None = None
    ) -> PermissionMap:
        """Resolve for the membership of user in agency (routes with user context)."""
        try:
            return await self._resolve_membership(user_id, agency_id, user_email)
        except Exception:
            logger.exception(
                "Permission resolution failed",
                user_id=str(user_id),
                agency_id=str(agency_id),
            )
            return EMPTY_PERMISSIONS

    async def has_permission(
        self, member_id: UUID, key: str, user_email: str | None = None
    ) -> bool:
        permissions = await self.resolve_permissions(member_id, user_email)
        return permissions.is_granted(key)

    async def has_any_permission(
        self, member_id: UUID, keys: Sequence[str], user_email: str | None = None
    ) -> bool:
        if not keys:
            return False
        permissions = await self.resolve_permissions(member_id, user_email)
        return any(permissions.is_granted(k) for k in keys)

    async def has_all_permissions(
        self, member_id: UUID, keys: Sequence[str], user_email: str | None = None
    ) -> bool:
        if not keys:
            return False
        permissions = await self.resolve_permissions(member_id, user_email)
        return all(permissions.is_granted(k) for k in keys)

    async def _sections(self, member_id: UUID) -> PermissionMap:
        lookup = await self.get_member(member_id)
        if isinstance(lookup, Missing):
            logger.warning("Member not found", member_id=str(member_id), reason=lookup.reason)
            return EMPTY_PERMISSIONS
        member = lookup.value
        if self._standing(member) is not _Standing.SEATED:
            return FULL_SECTION_ACCESS

        try:
            roles = await self._load_roles(member.id)
        except LookupFailed as e:
            logger.warning("Role lookup failed", member_id=str(member.id), error=str(e))
            return EMPTY_PERMISSIONS
        return merge_section_access(self._known_role_sections(roles))

    async def get_section_access(
        self, member_id: UUID, user_email: str | None = None
    ) -> PermissionMap:
        """Resolve which UI sections a member sees. Sections have no override layer."""
        if self._god_mode.matches(user_email):
            return FULL_SECTION_ACCESS
        try:
            return await self._sections(member_id)
        except Exception:
            logger.exception("Section access resolution failed", member_id=str(member_id))
            return EMPTY_PERMISSIONS

    # --- hierarchy ---

    async def get_member_type(self, user_id: UUID, agency_id: UUID) -> MemberType | None:
        lookup = await self.get_member_by_user_and_agency(user_id, agency_id)
        if isinstance(lookup, Missing):
            return None
        return lookup.value.member_type

    async def is_owner(self, user_id: UUID, agency_id: UUID) -> bool:
        return await self.get_member_type(user_id, agency_id) is MemberType.OWNER

    async def is_admin_or_owner(self, user_id: UUID, agency_id: UUID) -> bool:
        member_type = await self.get_member_type(user_id, agency_id)
        return member_type in (MemberType.OWNER, MemberType.ADMIN)

    async def can_manage_member(
        self, manager_user_id: UUID, target_member_id: UUID, agency_id: UUID
    ) -> bool:
        """Whether manager (by user id) may administer the target member in agency."""
        manager, target = await asyncio.gather(
            self.get_member_by_user_and_agency(manager_user_id, agency_id),
            self.get_member(target_member_id),
        )
        if isinstance(manager, Missing) or isinstance(target, Missing):
            return False
        if target.value.agency_id != agency_id:
            logger.warning(
                "Target member belongs to another agency",
                target_member_id=str(target_member_id),
                agency_id=str(agency_id),
            )
            return False
        return may_manage(manager.value.member_type, target.value.member_type)
