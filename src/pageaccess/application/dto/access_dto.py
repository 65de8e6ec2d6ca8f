"""Access-override DTOs - request variants keyed by ``action`` and outputs."""

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from pageaccess.domain.entities import Profile, TeamAccessOverride
from pageaccess.domain.exceptions import ValidationError
from pageaccess.domain.value_objects import OverridesPatch


@dataclass(frozen=True)
class GetUserContextRequest:
    """Read a user's overrides and their teams' overrides."""

    user_id: UUID
    action: str = field(default="get_user_context", init=False)


@dataclass(frozen=True)
class SetUserOverridesRequest:
    """Replace one or both of a user's override lists."""

    user_id: UUID
    overrides: OverridesPatch
    action: str = field(default="set_user_overrides", init=False)


@dataclass(frozen=True)
class SetTeamOverridesRequest:
    """Replace one or both of a team's override lists."""

    team_id: UUID
    overrides: OverridesPatch
    action: str = field(default="set_team_overrides", init=False)


AccessRequest = GetUserContextRequest | SetUserOverridesRequest | SetTeamOverridesRequest


def _parse_uuid(body: dict[str, Any], key: str) -> UUID:
    value = body.get(key)
    if not isinstance(value, str):
        raise ValidationError("invalid_request", details=key)
    try:
        return UUID(value)
    except ValueError:
        raise ValidationError("invalid_request", details=key) from None


def _parse_patch(body: dict[str, Any]) -> OverridesPatch:
    raw = body.get("overrides")
    if raw is None:
        return OverridesPatch()
    if not isinstance(raw, dict):
        raise ValidationError("invalid_request", details="overrides")
    return OverridesPatch(
        allowed_pages_add=raw.get("allowedPagesAdd"),
        allowed_pages_remove=raw.get("allowedPagesRemove"),
    )


def parse_request(body: Any) -> AccessRequest:
    """Build the request variant selected by ``body["action"]``."""
    action = body.get("action") if isinstance(body, dict) else None

    if action == "get_user_context":
        return GetUserContextRequest(user_id=_parse_uuid(body, "userId"))
    if action == "set_user_overrides":
        return SetUserOverridesRequest(
            user_id=_parse_uuid(body, "userId"),
            overrides=_parse_patch(body),
        )
    if action == "set_team_overrides":
        return SetTeamOverridesRequest(
            team_id=_parse_uuid(body, "teamId"),
            overrides=_parse_patch(body),
        )
    raise ValidationError("invalid_action")


@dataclass
class UserContextOutput:
    """Profile overrides plus the overrides of every team the user is in."""

    profile: Profile
    team_ids: list[UUID]
    team_overrides: list[TeamAccessOverride]
