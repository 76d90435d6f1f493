"""Pytest fixtures for Agency RBAC tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID, uuid4

import pytest

from agencyrbac.domain.entities import Member, PermissionOverride, Role
from agencyrbac.domain.exceptions import LookupFailed
from agencyrbac.domain.value_objects import MISSING, Found, GodModePolicy, MemberType, Missing
from agencyrbac.infrastructure.permission.permission_resolver import AgencyPermissionResolver

GOD_EMAIL = "root@agency.example"
AGENCY_ID = UUID("00000000-0000-4000-8000-00000000a001")


# --- Fake repositories ---


class FakeMemberRepository:
    """In-memory member repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Member] = {}
        self.fail = False
        self.calls = 0

    async def get_by_id(self, member_id: UUID) -> Found[Member] | Missing:
        self.calls += 1
        if self.fail:
            raise LookupFailed("member store unavailable")
        member = self._by_id.get(member_id)
        return Found(member) if member else MISSING

    async def get_by_user_and_agency(
        self, user_id: UUID, agency_id: UUID
    ) -> Found[Member] | Missing:
        self.calls += 1
        if self.fail:
            raise LookupFailed("member store unavailable")
        for member in self._by_id.values():
            if member.user_id == user_id and member.agency_id == agency_id:
                return Found(member)
        return MISSING

    def add_member(self, member: Member) -> None:
        """Helper to add member for tests."""
        self._by_id[member.id] = member


class FakeRoleRepository:
    """In-memory role repository with member assignments."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Role] = {}
        self._assigned: dict[UUID, list[UUID]] = {}
        self.fail = False
        self.calls = 0

    async def list_for_member(self, member_id: UUID) -> list[Role]:
        self.calls += 1
        if self.fail:
            raise LookupFailed("role store unavailable")
        roles = [self._by_id[r] for r in self._assigned.get(member_id, [])]
        return sorted(roles, key=lambda r: r.position)

    def assign(self, member_id: UUID, role: Role) -> None:
        """Helper to assign role to member for tests."""
        self._by_id[role.id] = role
        self._assigned.setdefault(member_id, []).append(role.id)


class FakeOverrideRepository:
    """In-memory permission override repository."""

    def __init__(self) -> None:
        self._by_member: dict[UUID, dict[str, PermissionOverride]] = {}
        self.fail = False
        self.calls = 0

    async def list_for_member(self, member_id: UUID) -> dict[str, PermissionOverride]:
        self.calls += 1
        if self.fail:
            raise LookupFailed("override store unavailable")
        return dict(self._by_member.get(member_id, {}))

    def set_override(
        self, member_id: UUID, key: str, value: bool, reason: str | None = None
    ) -> None:
        """Helper to add override for tests."""
        self._by_member.setdefault(member_id, {})[key] = PermissionOverride(
            member_id=member_id, permission_key=key, value=value, reason=reason
        )


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.members = FakeMemberRepository()
        self.roles = FakeRoleRepository()
        self.overrides = FakeOverrideRepository()

    @property
    def store_calls(self) -> int:
        return self.members.calls + self.roles.calls + self.overrides.calls

    def add_member(
        self,
        member_type: MemberType | None = MemberType.SEATED_USER,
        email: str | None = None,
        agency_id: UUID = AGENCY_ID,
        user_id: UUID | None = None,
    ) -> Member:
        member = Member(
            id=uuid4(),
            user_id=user_id or uuid4(),
            agency_id=agency_id,
            member_type=member_type,
            email=email,
        )
        self.members.add_member(member)
        return member


def make_role(
    permissions: dict[str, bool] | None = None,
    section_access: dict[str, bool] | None = None,
    position: int = 0,
    name: str = "role",
    agency_id: UUID = AGENCY_ID,
) -> Role:
    """Role with fresh id for tests."""
    return Role(
        id=uuid4(),
        agency_id=agency_id,
        name=name,
        display_name=name.title(),
        permissions=permissions or {},
        section_access=section_access or {},
        position=position,
    )


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager that yields the test's FakeUnitOfWork."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield fake_uow

    return _factory


@pytest.fixture
def god_mode() -> GodModePolicy:
    return GodModePolicy.of([GOD_EMAIL])


@pytest.fixture
def resolver(uow_factory, god_mode: GodModePolicy) -> AgencyPermissionResolver:
    """Strict resolver over the fake store."""
    return AgencyPermissionResolver(uow_factory, god_mode=god_mode)


@pytest.fixture
def mock_permission_resolver():
    """AsyncMock for PermissionResolver."""
    from unittest.mock import AsyncMock

    return AsyncMock()
