"""Audit log and activity feed repository ports (append-only)."""

from typing import Protocol

from pageaccess.domain.entities import ActivityEvent, AuditLogEntry


class AuditLogRepository(Protocol):
    """Port for appending audit entries."""

    async def append(self, entry: AuditLogEntry) -> None: ...


class ActivityRepository(Protocol):
    """Port for appending activity feed events."""

    async def append(self, event: ActivityEvent) -> None: ...
