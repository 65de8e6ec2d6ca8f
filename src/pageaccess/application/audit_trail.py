"""Best-effort audit trail and activity feed writer.

Side writes run in their own unit of work after the primary write has been
committed. A failure here is logged and never reaches the caller.
"""

import structlog

from pageaccess.application.ports import UnitOfWorkFactory
from pageaccess.domain.entities import ActivityEvent, AuditLogEntry

logger = structlog.get_logger()


class AuditTrail:
    """Appends audit entries and activity events, swallowing failures."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def record(self, entry: AuditLogEntry) -> bool:
        """Append audit entry. Returns False if the write failed."""
        try:
            async with self._uow_factory() as uow:
                await uow.audit_log.append(entry)
        except Exception as e:
            logger.warning(
                "audit_log_write_failed",
                action=entry.action,
                entity_table=entry.entity_table,
                entity_id=entry.entity_id,
                actor_id=str(entry.actor_id),
                error=str(e),
            )
            return False
        return True

    async def post_activity(self, event: ActivityEvent) -> bool:
        """Append activity event. Returns False if the write failed."""
        try:
            async with self._uow_factory() as uow:
                await uow.activities.append(event)
        except Exception as e:
            logger.warning(
                "activity_write_failed",
                type=event.type,
                user_id=str(event.user_id),
                error=str(e),
            )
            return False
        return True
