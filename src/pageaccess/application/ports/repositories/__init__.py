"""Repository ports."""

from pageaccess.application.ports.repositories.audit_log_repository import (
    ActivityRepository,
    AuditLogRepository,
)
from pageaccess.application.ports.repositories.profile_repository import (
    ProfileRepository,
)
from pageaccess.application.ports.repositories.team_override_repository import (
    TeamOverrideRepository,
)
from pageaccess.application.ports.repositories.team_repository import (
    TeamMembershipRepository,
    TeamRepository,
)

__all__ = [
    "ActivityRepository",
    "AuditLogRepository",
    "ProfileRepository",
    "TeamMembershipRepository",
    "TeamOverrideRepository",
    "TeamRepository",
]
