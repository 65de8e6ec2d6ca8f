"""PostgreSQL audit log and activity feed repositories (append-only)."""

from uuid import uuid4

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from pageaccess.domain.entities import ActivityEvent, AuditLogEntry
from pageaccess.infrastructure.persistence.postgres.connection import store_errors


class PostgresAuditLogRepository:
    """Audit log repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def append(self, entry: AuditLogEntry) -> None:
        """Insert audit entry."""
        with store_errors():
            await self._conn.execute(
                "INSERT INTO audit_log "
                "(id, actor_id, entity_table, entity_id, action, old_data, new_data, created_at) "
                "VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
                (
                    entry.id or uuid4(),
                    entry.actor_id,
                    entry.entity_table,
                    entry.entity_id,
                    entry.action,
                    Jsonb(entry.old_data),
                    Jsonb(entry.new_data),
                    entry.created_at,
                ),
            )


class PostgresActivityRepository:
    """Activity feed repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def append(self, event: ActivityEvent) -> None:
        """Insert activity event."""
        with store_errors():
            await self._conn.execute(
                "INSERT INTO activities (id, user_id, type, points, metadata, created_at) "
                "VALUES (%s, %s, %s, %s, %s, %s)",
                (
                    event.id or uuid4(),
                    event.user_id,
                    event.type,
                    event.points,
                    Jsonb(event.metadata),
                    event.created_at,
                ),
            )
