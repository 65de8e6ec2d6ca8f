"""Set team overrides use case."""

from datetime import UTC, datetime
from uuid import UUID

import structlog

from pageaccess.application.audit_trail import AuditTrail
from pageaccess.application.ports import UnitOfWorkFactory
from pageaccess.domain.entities import AuditLogEntry, TeamAccessOverride
from pageaccess.domain.exceptions import NotFound, RepositoryError, StoreError
from pageaccess.domain.value_objects import (
    DEFAULT_DASHBOARD_PREFIX,
    OverridesPatch,
    PageOverrides,
    snapshot_lists,
)

logger = structlog.get_logger()

AUDIT_ACTION = "admin_access_overrides_set_team"


class SetTeamOverridesUseCase:
    """Upsert a team's page overrides, then audit the change."""

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
        self, actor_id: UUID, team_id: UUID, patch: OverridesPatch
    ) -> TeamAccessOverride:
        """Create the team's override row on first write, replace it after."""
        # Store errors not mapped below come from opening the unit of work
        try:
            async with self._uow_factory() as uow:
                try:
                    team = await uow.teams.get_by_id(team_id)
                except RepositoryError as e:
                    raise StoreError("team_fetch_failed") from e
                if not team:
                    raise NotFound("team_not_found")

                try:
                    before = await uow.team_overrides.get_by_team_id(team_id)
                except RepositoryError as e:
                    raise StoreError("team_overrides_fetch_failed") from e

                overrides = PageOverrides.merge(
                    patch,
                    previous_add=before.allowed_pages_add if before else None,
                    previous_remove=before.allowed_pages_remove if before else None,
                    prefix=self._prefix,
                )

                now = datetime.now(UTC)
                try:
                    updated = await uow.team_overrides.upsert(team_id, overrides, now)
                    await uow.commit()
                except RepositoryError as e:
                    raise StoreError("team_overrides_upsert_failed") from e
        except RepositoryError as e:
            raise StoreError("team_fetch_failed") from e

        logger.info(
            "team_overrides_updated",
            actor_id=str(actor_id),
            team_id=str(team_id),
            created=before is None,
            allowed_pages_add=overrides.allowed_pages_add,
            allowed_pages_remove=overrides.allowed_pages_remove,
        )

        await self._audit.record(
            AuditLogEntry(
                actor_id=actor_id,
                entity_table="team_access_overrides",
                entity_id=str(team_id),
                action=AUDIT_ACTION,
                old_data=snapshot_lists(
                    before.allowed_pages_add if before else None,
                    before.allowed_pages_remove if before else None,
                ),
                new_data=overrides.snapshot(),
                created_at=now,
            )
        )
        return updated
