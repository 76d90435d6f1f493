"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool

from agencyrbac.domain.exceptions import LookupFailed
from agencyrbac.infrastructure.persistence.postgres.member_repository import (
    PostgresMemberRepository,
)
from agencyrbac.infrastructure.persistence.postgres.override_repository import (
    PostgresOverrideRepository,
)
from agencyrbac.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one pooled connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._members = PostgresMemberRepository(self._conn)
        self._roles = PostgresRoleRepository(self._conn)
        self._overrides = PostgresOverrideRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        # pool commits on clean exit and rolls back on error
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def members(self) -> PostgresMemberRepository:
        return self._members

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def overrides(self) -> PostgresOverrideRepository:
        return self._overrides


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    Driver and pool errors (including pool timeouts) are raised as LookupFailed.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        try:
            async with PostgresUnitOfWork(pool) as uow:
                yield uow
        except psycopg.Error as e:
            raise LookupFailed(str(e)) from e

    return factory
