"""Unit tests for section access resolution."""

from uuid import uuid4

import pytest
from structlog.testing import capture_logs

from agencyrbac.domain.catalog import FULL_SECTION_ACCESS
from agencyrbac.domain.value_objects import MemberType

from tests.conftest import GOD_EMAIL, make_role


@pytest.mark.asyncio
async def test_god_mode_sees_every_section(resolver, fake_uow) -> None:
    assert await resolver.get_section_access(uuid4(), GOD_EMAIL) == FULL_SECTION_ACCESS
    assert fake_uow.store_calls == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("member_type", [MemberType.OWNER, MemberType.ADMIN])
async def test_owner_and_admin_see_every_section(resolver, fake_uow, member_type) -> None:
    member = fake_uow.add_member(member_type)
    assert await resolver.get_section_access(member.id) == FULL_SECTION_ACCESS


@pytest.mark.asyncio
async def test_seated_user_sees_union_of_role_sections(resolver, fake_uow) -> None:
    member = fake_uow.add_member()
    fake_uow.roles.assign(member.id, make_role(section_access={"leads": True, "reports": False}))
    fake_uow.roles.assign(member.id, make_role(section_access={"calendar": True}))
    sections = await resolver.get_section_access(member.id)
    assert sections.to_dict() == {"leads": True, "calendar": True}
    assert sections["reports"] is False


@pytest.mark.asyncio
async def test_overrides_do_not_touch_sections(resolver, fake_uow) -> None:
    member = fake_uow.add_member()
    fake_uow.roles.assign(member.id, make_role(section_access={"leads": True}))
    fake_uow.overrides.set_override(member.id, "can_view_leads", False)
    sections = await resolver.get_section_access(member.id)
    assert sections.to_dict() == {"leads": True}
    assert fake_uow.overrides.calls == 0


@pytest.mark.asyncio
async def test_strict_mode_drops_unknown_sections(resolver, fake_uow) -> None:
    member = fake_uow.add_member()
    fake_uow.roles.assign(member.id, make_role(section_access={"leads": True, "arcade": True}))
    assert (await resolver.get_section_access(member.id)).to_dict() == {"leads": True}


@pytest.mark.asyncio
async def test_missing_member_sees_nothing(resolver) -> None:
    assert (await resolver.get_section_access(uuid4())).to_dict() == {}


@pytest.mark.asyncio
async def test_role_lookup_failure_sees_nothing(resolver, fake_uow) -> None:
    member = fake_uow.add_member()
    fake_uow.roles.assign(member.id, make_role(section_access={"leads": True}))
    fake_uow.roles.fail = True
    assert (await resolver.get_section_access(member.id)).to_dict() == {}


@pytest.mark.asyncio
async def test_missing_member_is_logged(resolver) -> None:
    member_id = uuid4()
    with capture_logs() as logs:
        await resolver.get_section_access(member_id)
    assert any(
        e["event"] == "Member not found" and e["log_level"] == "warning"
        and e["member_id"] == str(member_id)
        for e in logs
    )
