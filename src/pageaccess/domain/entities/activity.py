"""Activity event shown in a user's activity feed."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class ActivityEvent:
    """Append-only activity feed record."""

    user_id: UUID
    type: str
    created_at: datetime
    points: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)
    id: UUID | None = field(default=None, compare=False)
