"""Set user overrides use case."""

from datetime import UTC, datetime
from uuid import UUID

import structlog

from pageaccess.application.audit_trail import AuditTrail
from pageaccess.application.ports import UnitOfWorkFactory
from pageaccess.domain.entities import ActivityEvent, AuditLogEntry, Profile
from pageaccess.domain.exceptions import NotFound, RepositoryError, StoreError
from pageaccess.domain.value_objects import (
    DEFAULT_DASHBOARD_PREFIX,
    OverridesPatch,
    PageOverrides,
    snapshot_lists,
)

logger = structlog.get_logger()

AUDIT_ACTION = "admin_access_overrides_set_user"
ACTIVITY_TYPE = "admin_access_overrides_updated"


class SetUserOverridesUseCase:
    """Partially update a user's page overrides, then audit the change."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        audit_trail: AuditTrail,
        dashboard_prefix: str = DEFAULT_DASHBOARD_PREFIX,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_trail
        self._prefix = dashboard_prefix

    async def execute(
        self, actor_id: UUID, user_id: UUID, patch: OverridesPatch
    ) -> Profile:
        """Lists omitted from patch keep their persisted value.

        Validation happens before any write. The update is committed before
        the audit entry and activity event are appended.
        """
        # Store errors not mapped below come from opening the unit of work
        try:
            async with self._uow_factory() as uow:
                try:
                    before = await uow.profiles.get_by_id(user_id)
                except RepositoryError as e:
                    raise StoreError("profile_fetch_failed") from e
                if not before:
                    raise NotFound("user_not_found")

                overrides = PageOverrides.merge(
                    patch,
                    previous_add=before.allowed_pages_add,
                    previous_remove=before.allowed_pages_remove,
                    prefix=self._prefix,
                )

                now = datetime.now(UTC)
                try:
                    updated = await uow.profiles.update_overrides(user_id, overrides, now)
                    await uow.commit()
                except RepositoryError as e:
                    raise StoreError("profile_update_failed") from e
                if not updated:
                    # Row vanished between read and write
                    raise NotFound("user_not_found")
        except RepositoryError as e:
            raise StoreError("profile_fetch_failed") from e

        logger.info(
            "user_overrides_updated",
            actor_id=str(actor_id),
            user_id=str(user_id),
            allowed_pages_add=overrides.allowed_pages_add,
            allowed_pages_remove=overrides.allowed_pages_remove,
        )

        await self._audit.record(
            AuditLogEntry(
                actor_id=actor_id,
                entity_table="profiles",
                entity_id=str(user_id),
                action=AUDIT_ACTION,
                old_data=snapshot_lists(before.allowed_pages_add, before.allowed_pages_remove),
                new_data=overrides.snapshot(),
                created_at=now,
            )
        )
        await self._audit.post_activity(
            ActivityEvent(
                user_id=user_id,
                type=ACTIVITY_TYPE,
                points=0,
                metadata=overrides.snapshot(),
                created_at=now,
            )
        )
        return updated
