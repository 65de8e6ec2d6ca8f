"""Pytest fixtures for pageaccess tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import datetime
from uuid import UUID, uuid4

import pytest

from pageaccess.application.audit_trail import AuditTrail
from pageaccess.domain.entities import (
    ActivityEvent,
    AuditLogEntry,
    Profile,
    Team,
    TeamAccessOverride,
)
from pageaccess.domain.exceptions import RepositoryError
from pageaccess.domain.value_objects import PageOverrides, UserRole


class _Failing:
    """Mixin - raise RepositoryError from methods listed in ``fail_on``."""

    def __init__(self) -> None:
        self.fail_on: set[str] = set()

    def _maybe_fail(self, method: str) -> None:
        if method in self.fail_on:
            raise RepositoryError(f"{type(self).__name__}.{method} unavailable")


# --- Fake repositories ---


class FakeProfileRepository(_Failing):
    """In-memory profile repository."""

    def __init__(self) -> None:
        super().__init__()
        self._by_id: dict[UUID, Profile] = {}

    async def get_by_id(self, user_id: UUID) -> Profile | None:
        self._maybe_fail("get_by_id")
        profile = self._by_id.get(user_id)
        return replace(profile) if profile else None

    async def update_overrides(
        self, user_id: UUID, overrides: PageOverrides, updated_at: datetime
    ) -> Profile | None:
        self._maybe_fail("update_overrides")
        profile = self._by_id.get(user_id)
        if not profile:
            return None
        updated = replace(
            profile,
            allowed_pages_add=list(overrides.allowed_pages_add),
            allowed_pages_remove=list(overrides.allowed_pages_remove),
            updated_at=updated_at,
        )
        self._by_id[user_id] = updated
        return replace(updated)

    def add(self, profile: Profile) -> Profile:
        """Helper to add profile for tests."""
        self._by_id[profile.id] = profile
        return profile

    def stored(self, user_id: UUID) -> Profile | None:
        """Helper to read stored state without failure injection."""
        return self._by_id.get(user_id)


class FakeTeamRepository(_Failing):
    """In-memory team repository."""

    def __init__(self) -> None:
        super().__init__()
        self._by_id: dict[UUID, Team] = {}

    async def get_by_id(self, team_id: UUID) -> Team | None:
        self._maybe_fail("get_by_id")
        return self._by_id.get(team_id)

    def add(self, team: Team) -> Team:
        self._by_id[team.id] = team
        return team


class FakeTeamMembershipRepository(_Failing):
    """In-memory team membership repository."""

    def __init__(self) -> None:
        super().__init__()
        self._pairs: list[tuple[UUID, UUID]] = []

    async def list_team_ids(self, user_id: UUID) -> list[UUID]:
        self._maybe_fail("list_team_ids")
        return [team_id for team_id, member in self._pairs if member == user_id]

    def add(self, team_id: UUID, user_id: UUID) -> None:
        self._pairs.append((team_id, user_id))


class FakeTeamOverrideRepository(_Failing):
    """In-memory team override repository keyed by team id."""

    def __init__(self) -> None:
        super().__init__()
        self._by_team: dict[UUID, TeamAccessOverride] = {}

    async def get_by_team_id(self, team_id: UUID) -> TeamAccessOverride | None:
        self._maybe_fail("get_by_team_id")
        row = self._by_team.get(team_id)
        return replace(row) if row else None

    async def list_by_team_ids(self, team_ids: list[UUID]) -> list[TeamAccessOverride]:
        self._maybe_fail("list_by_team_ids")
        return [replace(self._by_team[t]) for t in team_ids if t in self._by_team]

    async def upsert(
        self, team_id: UUID, overrides: PageOverrides, updated_at: datetime
    ) -> TeamAccessOverride:
        self._maybe_fail("upsert")
        row = TeamAccessOverride(
            team_id=team_id,
            allowed_pages_add=list(overrides.allowed_pages_add),
            allowed_pages_remove=list(overrides.allowed_pages_remove),
            updated_at=updated_at,
        )
        self._by_team[team_id] = row
        return replace(row)

    def add(self, row: TeamAccessOverride) -> TeamAccessOverride:
        self._by_team[row.team_id] = row
        return row

    def count(self) -> int:
        return len(self._by_team)


class FakeAuditLogRepository(_Failing):
    """In-memory append-only audit log."""

    def __init__(self) -> None:
        super().__init__()
        self.entries: list[AuditLogEntry] = []

    async def append(self, entry: AuditLogEntry) -> None:
        self._maybe_fail("append")
        self.entries.append(entry)


class FakeActivityRepository(_Failing):
    """In-memory append-only activity feed."""

    def __init__(self) -> None:
        super().__init__()
        self.events: list[ActivityEvent] = []

    async def append(self, event: ActivityEvent) -> None:
        self._maybe_fail("append")
        self.events.append(event)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.profiles = FakeProfileRepository()
        self.teams = FakeTeamRepository()
        self.memberships = FakeTeamMembershipRepository()
        self.team_overrides = FakeTeamOverrideRepository()
        self.audit_log = FakeAuditLogRepository()
        self.activities = FakeActivityRepository()
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fake rate limiter ---


class FakeRateLimiter:
    """Sliding-window limiter over an injectable clock."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now
        self.unavailable = False
        self._hits: dict[str, list[float]] = {}

    async def hit(self, key: str, window_seconds: int, max_requests: int) -> bool:
        if self.unavailable:
            raise RepositoryError("rate limiter unavailable")
        hits = [t for t in self._hits.get(key, []) if t > self.now - window_seconds]
        if len(hits) >= max_requests:
            self._hits[key] = hits
            return False
        hits.append(self.now)
        self._hits[key] = hits
        return True


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def audit_trail(uow_factory) -> AuditTrail:
    return AuditTrail(uow_factory)


@pytest.fixture
def rate_limiter() -> FakeRateLimiter:
    return FakeRateLimiter()


@pytest.fixture
def admin(fake_uow: FakeUnitOfWork) -> Profile:
    """Admin profile present in the store."""
    return fake_uow.profiles.add(Profile(id=uuid4(), role=UserRole.ADMIN))


@pytest.fixture
def member(fake_uow: FakeUnitOfWork) -> Profile:
    """Member profile with a prior remove list."""
    return fake_uow.profiles.add(
        Profile(
            id=uuid4(),
            role=UserRole.MEMBER,
            allowed_pages_add=[],
            allowed_pages_remove=["/dashboard/c"],
        )
    )
