"""Team and team-scoped override entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass
class Team:
    """Team of dashboard users."""

    id: UUID
    name: str | None = None


@dataclass
class TeamAccessOverride:
    """Page overrides applied to every member of a team. One row per team."""

    team_id: UUID
    allowed_pages_add: list[str] | None = field(default_factory=list)
    allowed_pages_remove: list[str] | None = field(default_factory=list)
    updated_at: datetime | None = None
