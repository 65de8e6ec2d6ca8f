"""Team access override repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from pageaccess.domain.entities import TeamAccessOverride
from pageaccess.domain.value_objects import PageOverrides


class TeamOverrideRepository(Protocol):
    """Port for team override persistence, keyed by team id."""

    async def get_by_team_id(self, team_id: UUID) -> TeamAccessOverride | None: ...

    async def list_by_team_ids(self, team_ids: list[UUID]) -> list[TeamAccessOverride]: ...

    async def upsert(
        self, team_id: UUID, overrides: PageOverrides, updated_at: datetime
    ) -> TeamAccessOverride: ...
