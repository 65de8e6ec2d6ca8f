"""Profile repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from pageaccess.domain.entities import Profile
from pageaccess.domain.value_objects import PageOverrides


class ProfileRepository(Protocol):
    """Port for profile persistence."""

    async def get_by_id(self, user_id: UUID) -> Profile | None: ...

    async def update_overrides(
        self, user_id: UUID, overrides: PageOverrides, updated_at: datetime
    ) -> Profile | None: ...
