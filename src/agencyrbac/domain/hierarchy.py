"""Management hierarchy between member tiers."""

from agencyrbac.domain.value_objects import MemberType


def may_manage(manager: MemberType | None, target: MemberType | None) -> bool:
    """Owners manage anyone, admins manage seated users, nobody else manages.

    An unknown tier on either side never grants management.
    """
    if manager is None or target is None:
        return False
    if manager is MemberType.OWNER:
        return True
    if manager is MemberType.ADMIN:
        return target is MemberType.SEATED_USER
    return False
