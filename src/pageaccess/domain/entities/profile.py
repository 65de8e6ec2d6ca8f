"""Profile entity - one per dashboard user."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from pageaccess.domain.value_objects.user_role import UserRole


@dataclass
class Profile:
    """User profile with role and page overrides."""

    id: UUID
    role: UserRole
    allowed_pages_add: list[str] | None = field(default_factory=list)
    allowed_pages_remove: list[str] | None = field(default_factory=list)
    updated_at: datetime | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
