"""Domain entities."""

from pageaccess.domain.entities.activity import ActivityEvent
from pageaccess.domain.entities.audit_log import AuditLogEntry
from pageaccess.domain.entities.profile import Profile
from pageaccess.domain.entities.team import Team, TeamAccessOverride

__all__ = [
    "ActivityEvent",
    "AuditLogEntry",
    "Profile",
    "Team",
    "TeamAccessOverride",
]
