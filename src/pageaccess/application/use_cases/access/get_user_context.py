"""Get user context use case - read-only view of a user's overrides."""

from uuid import UUID

from pageaccess.application.dto.access_dto import UserContextOutput
from pageaccess.application.ports import UnitOfWorkFactory
from pageaccess.domain.exceptions import NotFound, RepositoryError, StoreError


class GetUserContextUseCase:
    """Profile overrides, team ids and team overrides for one user."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: UUID) -> UserContextOutput:
        # Store errors not mapped below come from opening the unit of work
        try:
            async with self._uow_factory() as uow:
                try:
                    profile = await uow.profiles.get_by_id(user_id)
                except RepositoryError as e:
                    raise StoreError("profile_fetch_failed") from e
                if not profile:
                    raise NotFound("user_not_found")

                try:
                    team_ids = await uow.memberships.list_team_ids(user_id)
                except RepositoryError as e:
                    raise StoreError("team_membership_fetch_failed") from e

                team_overrides = []
                if team_ids:
                    try:
                        team_overrides = await uow.team_overrides.list_by_team_ids(team_ids)
                    except RepositoryError as e:
                        raise StoreError("team_overrides_fetch_failed") from e
        except RepositoryError as e:
            raise StoreError("profile_fetch_failed") from e

        return UserContextOutput(
            profile=profile,
            team_ids=team_ids,
            team_overrides=team_overrides,
        )
