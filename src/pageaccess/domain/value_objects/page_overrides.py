"""Page override lists - explicit grants and revocations of dashboard pages.

An override list is layered on top of the role/plan-derived default page set.
Persisted lists are always normalized: unique, trimmed, non-empty strings in
ascending order, each under the dashboard prefix, with no path present in both
the add list and the remove list.
"""

from dataclasses import dataclass
from typing import Any

from pageaccess.domain.exceptions import ValidationError

DEFAULT_DASHBOARD_PREFIX = "/dashboard"


def normalize_paths(raw: Any) -> list[str]:
    """Coerce raw input into a sorted list of unique, trimmed, non-empty paths.

    Anything that is not a list (or tuple) yields an empty list; entries that
    are not strings are dropped.
    """
    if not isinstance(raw, (list, tuple)):
        return []
    seen: set[str] = set()
    for item in raw:
        if not isinstance(item, str):
            continue
        path = item.strip()
        if path:
            seen.add(path)
    return sorted(seen)


def validate_dashboard_paths(
    paths: list[str], prefix: str = DEFAULT_DASHBOARD_PREFIX
) -> None:
    """Raise ValidationError for the first path outside the dashboard."""
    for path in paths:
        if not path.startswith(prefix):
            raise ValidationError("invalid_dashboard_path", details=path)


def validate_no_overlap(add: list[str], remove: list[str]) -> None:
    """Raise ValidationError if a path is both granted and revoked."""
    granted = set(add)
    for path in remove:
        if path in granted:
            raise ValidationError("allowed_pages_add_remove_overlap")


@dataclass(frozen=True)
class OverridesPatch:
    """Partial update from a request. ``None`` keeps the persisted list."""

    allowed_pages_add: Any = None
    allowed_pages_remove: Any = None


@dataclass(frozen=True)
class PageOverrides:
    """Normalized and validated pair of override lists."""

    allowed_pages_add: list[str]
    allowed_pages_remove: list[str]

    @classmethod
    def merge(
        cls,
        patch: OverridesPatch,
        previous_add: list[str] | None = None,
        previous_remove: list[str] | None = None,
        prefix: str = DEFAULT_DASHBOARD_PREFIX,
    ) -> "PageOverrides":
        """Apply patch over previous lists, normalize, then validate."""
        add = normalize_paths(
            patch.allowed_pages_add
            if patch.allowed_pages_add is not None
            else previous_add or []
        )
        remove = normalize_paths(
            patch.allowed_pages_remove
            if patch.allowed_pages_remove is not None
            else previous_remove or []
        )
        validate_dashboard_paths(add, prefix)
        validate_dashboard_paths(remove, prefix)
        validate_no_overlap(add, remove)
        return cls(allowed_pages_add=add, allowed_pages_remove=remove)

    def snapshot(self) -> dict[str, list[str]]:
        """Plain dict for audit and activity payloads."""
        return {
            "allowed_pages_add": list(self.allowed_pages_add),
            "allowed_pages_remove": list(self.allowed_pages_remove),
        }


def snapshot_lists(
    allowed_pages_add: list[str] | None, allowed_pages_remove: list[str] | None
) -> dict[str, list[str]]:
    """Snapshot of stored (possibly missing) lists, missing as empty."""
    return {
        "allowed_pages_add": list(allowed_pages_add or []),
        "allowed_pages_remove": list(allowed_pages_remove or []),
    }
