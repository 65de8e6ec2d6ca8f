"""Authorize admin use case - admin gate in front of every action."""

from uuid import UUID

import structlog

from pageaccess.application.ports import Identity, UnitOfWorkFactory
from pageaccess.domain.exceptions import (
    AuthenticationFailed,
    PermissionDenied,
    RepositoryError,
)

logger = structlog.get_logger()


class AuthorizeAdminUseCase:
    """Resolve the caller to an admin id or reject the request."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, identity: Identity | None) -> UUID:
        """Return the admin's user id, used as the audit actor."""
        if identity is None:
            raise AuthenticationFailed("invalid_auth")
        try:
            user_id = UUID(identity.user_id)
        except ValueError:
            raise AuthenticationFailed("invalid_auth") from None

        try:
            async with self._uow_factory() as uow:
                profile = await uow.profiles.get_by_id(user_id)
        except RepositoryError as e:
            logger.warning("admin_profile_lookup_failed", user_id=str(user_id), error=str(e))
            raise PermissionDenied() from e

        if not profile or not profile.is_admin:
            logger.info("admin_gate_rejected", user_id=str(user_id))
            raise PermissionDenied()
        return user_id
