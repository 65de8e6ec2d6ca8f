"""Admin access-overrides API resource."""

import json
from typing import Any
from uuid import UUID

import falcon
import falcon.asgi
import structlog

from pageaccess.application.dto.access_dto import (
    AccessRequest,
    GetUserContextRequest,
    SetTeamOverridesRequest,
    SetUserOverridesRequest,
    parse_request,
)
from pageaccess.application.use_cases.access.authorize_admin import AuthorizeAdminUseCase
from pageaccess.application.use_cases.access.check_rate_limit import CheckRateLimitUseCase
from pageaccess.application.use_cases.access.get_user_context import GetUserContextUseCase
from pageaccess.application.use_cases.access.set_team_overrides import SetTeamOverridesUseCase
from pageaccess.application.use_cases.access.set_user_overrides import SetUserOverridesUseCase
from pageaccess.domain.entities import Profile, TeamAccessOverride
from pageaccess.domain.exceptions import AuthenticationFailed, PageAccessError

logger = structlog.get_logger()


def _profile_view(profile: Profile) -> dict[str, Any]:
    return {
        "id": str(profile.id),
        "allowed_pages_add": list(profile.allowed_pages_add or []),
        "allowed_pages_remove": list(profile.allowed_pages_remove or []),
    }


def _team_override_view(override: TeamAccessOverride) -> dict[str, Any]:
    return {
        "team_id": str(override.team_id),
        "allowed_pages_add": list(override.allowed_pages_add or []),
        "allowed_pages_remove": list(override.allowed_pages_remove or []),
    }


async def _read_json(req: falcon.asgi.Request) -> Any:
    """Body parsed as JSON whatever the Content-Type; None when empty."""
    raw = await req.stream.read()
    if not raw.strip():
        return None
    return json.loads(raw)


def _set_error(resp: falcon.asgi.Response, error: PageAccessError) -> None:
    resp.status = falcon.code_to_http_status(error.status)
    resp.media = error.to_dict()


class AccessOverridesResource:
    """POST /v1/admin-access-overrides - read or write page overrides as admin.

    Gates run in order: token, admin role, rate limit. Only then is the body
    parsed and the action dispatched.
    """

    def __init__(
        self,
        authorize_admin: AuthorizeAdminUseCase,
        check_rate_limit: CheckRateLimitUseCase,
        get_user_context: GetUserContextUseCase,
        set_user_overrides: SetUserOverridesUseCase,
        set_team_overrides: SetTeamOverridesUseCase,
    ) -> None:
        self._authorize = authorize_admin
        self._rate_limit = check_rate_limit
        self._get_context = get_user_context
        self._set_user = set_user_overrides
        self._set_team = set_team_overrides

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Dispatch one action for an authenticated, rate-limited admin."""
        try:
            auth_error = getattr(req.context, "auth_error", None)
            if auth_error:
                raise AuthenticationFailed(auth_error)
            admin_id = await self._authorize.execute(getattr(req.context, "user", None))
            await self._rate_limit.execute(admin_id)
        except PageAccessError as e:
            logger.info("access_overrides_rejected", error=e.code)
            _set_error(resp, e)
            return

        try:
            body = await _read_json(req)
            request = parse_request(body)
            resp.media = await self._dispatch(admin_id, request)
            resp.status = falcon.HTTP_200
        except PageAccessError as e:
            logger.info("access_overrides_failed", error=e.code, details=e.details)
            _set_error(resp, e)
        except Exception as e:
            logger.exception("access_overrides_unhandled_error")
            resp.status = falcon.HTTP_500
            resp.media = {"error": str(e) or type(e).__name__}

    async def _dispatch(self, admin_id: UUID, request: AccessRequest) -> dict[str, Any]:
        if isinstance(request, GetUserContextRequest):
            context = await self._get_context.execute(request.user_id)
            return {
                "profile": _profile_view(context.profile),
                "teamIds": [str(t) for t in context.team_ids],
                "teamOverrides": [_team_override_view(o) for o in context.team_overrides],
            }
        if isinstance(request, SetUserOverridesRequest):
            profile = await self._set_user.execute(admin_id, request.user_id, request.overrides)
            return {"profile": _profile_view(profile)}
        if isinstance(request, SetTeamOverridesRequest):
            override = await self._set_team.execute(admin_id, request.team_id, request.overrides)
            return {"teamOverrides": _team_override_view(override)}
        raise TypeError(f"Unsupported request: {type(request).__name__}")
