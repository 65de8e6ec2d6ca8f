"""Unit of Work port - transactional boundary."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from pageaccess.application.ports.repositories import (
    ActivityRepository,
    AuditLogRepository,
    ProfileRepository,
    TeamMembershipRepository,
    TeamOverrideRepository,
    TeamRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def profiles(self) -> ProfileRepository: ...

    @property
    def teams(self) -> TeamRepository: ...

    @property
    def memberships(self) -> TeamMembershipRepository: ...

    @property
    def team_overrides(self) -> TeamOverrideRepository: ...

    @property
    def audit_log(self) -> AuditLogRepository: ...

    @property
    def activities(self) -> ActivityRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    def __call__(self) -> AbstractAsyncContextManager[UnitOfWork]: ...
