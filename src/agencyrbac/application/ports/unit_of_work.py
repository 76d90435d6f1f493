"""Unit of Work port - read boundary over one store connection."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from agencyrbac.application.ports.repositories.member_repository import MemberRepository
from agencyrbac.application.ports.repositories.override_repository import (
    OverrideRepository,
)
from agencyrbac.application.ports.repositories.role_repository import RoleRepository


class UnitOfWork(Protocol):
    """Unit of Work - gives repository access on a single connection."""

    @property
    def members(self) -> MemberRepository: ...

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def overrides(self) -> OverrideRepository: ...


class UnitOfWorkFactory(Protocol):
    """Factory for UnitOfWork instances (async context manager).

    Store failures inside the managed block surface as LookupFailed.
    """

    def __call__(self) -> AbstractAsyncContextManager[UnitOfWork]: ...
