"""Dashboard user roles."""

from enum import StrEnum


class UserRole(StrEnum):
    """Role stored on a profile."""

    ADMIN = "admin"
    MEMBER = "member"
