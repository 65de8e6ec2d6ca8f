"""Audit log entry - immutable before/after record of a privileged write."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class AuditLogEntry:
    """Append-only audit record."""

    actor_id: UUID
    entity_table: str
    entity_id: str
    action: str
    old_data: dict[str, Any]
    new_data: dict[str, Any]
    created_at: datetime
    id: UUID | None = field(default=None, compare=False)
