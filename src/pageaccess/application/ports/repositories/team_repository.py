"""Team and team membership repository ports."""

from typing import Protocol
from uuid import UUID

from pageaccess.domain.entities import Team


class TeamRepository(Protocol):
    """Port for team lookup."""

    async def get_by_id(self, team_id: UUID) -> Team | None: ...


class TeamMembershipRepository(Protocol):
    """Port for team membership lookup (read-only)."""

    async def list_team_ids(self, user_id: UUID) -> list[UUID]: ...
