"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
import structlog
from psycopg_pool import AsyncConnectionPool

from pageaccess.application.ports import UnitOfWorkFactory
from pageaccess.infrastructure.persistence.postgres.audit_log_repository import (
    PostgresActivityRepository,
    PostgresAuditLogRepository,
)
from pageaccess.infrastructure.persistence.postgres.connection import store_errors
from pageaccess.infrastructure.persistence.postgres.profile_repository import (
    PostgresProfileRepository,
)
from pageaccess.infrastructure.persistence.postgres.team_override_repository import (
    PostgresTeamOverrideRepository,
)
from pageaccess.infrastructure.persistence.postgres.team_repository import (
    PostgresTeamMembershipRepository,
    PostgresTeamRepository,
)

logger = structlog.get_logger()


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        with store_errors():
            self._conn = await self._conn_cm.__aenter__()
        self._profiles = PostgresProfileRepository(self._conn)
        self._teams = PostgresTeamRepository(self._conn)
        self._memberships = PostgresTeamMembershipRepository(self._conn)
        self._team_overrides = PostgresTeamOverrideRepository(self._conn)
        self._audit_log = PostgresAuditLogRepository(self._conn)
        self._activities = PostgresActivityRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        try:
            if exc_type and self._conn:
                await self._discard()
        finally:
            if self._conn_cm:
                with store_errors():
                    await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    async def _discard(self) -> None:
        """Roll back on the error path without masking the error being raised."""
        try:
            await self._conn.rollback()
        except psycopg.Error as e:
            logger.warning("uow_rollback_failed", error=str(e))

    @property
    def profiles(self) -> PostgresProfileRepository:
        return self._profiles

    @property
    def teams(self) -> PostgresTeamRepository:
        return self._teams

    @property
    def memberships(self) -> PostgresTeamMembershipRepository:
        return self._memberships

    @property
    def team_overrides(self) -> PostgresTeamOverrideRepository:
        return self._team_overrides

    @property
    def audit_log(self) -> PostgresAuditLogRepository:
        return self._audit_log

    @property
    def activities(self) -> PostgresActivityRepository:
        return self._activities

    async def commit(self) -> None:
        if self._conn:
            with store_errors():
                await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            with store_errors():
                await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> UnitOfWorkFactory:
    """Create UnitOfWork factory (async context manager).

    Commits when the block exits normally. On error the transaction is rolled
    back by the unit of work itself.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        async with PostgresUnitOfWork(pool) as uow:
            yield uow
            await uow.commit()

    return factory
