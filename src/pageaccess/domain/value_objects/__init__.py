"""Domain value objects."""

from pageaccess.domain.value_objects.page_overrides import (
    DEFAULT_DASHBOARD_PREFIX,
    OverridesPatch,
    PageOverrides,
    normalize_paths,
    snapshot_lists,
    validate_dashboard_paths,
    validate_no_overlap,
)
from pageaccess.domain.value_objects.user_role import UserRole

__all__ = [
    "DEFAULT_DASHBOARD_PREFIX",
    "OverridesPatch",
    "PageOverrides",
    "UserRole",
    "normalize_paths",
    "snapshot_lists",
    "validate_dashboard_paths",
    "validate_no_overlap",
]
