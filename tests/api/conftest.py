"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from pageaccess.application.ports import Identity
from pageaccess.application.use_cases.access.authorize_admin import AuthorizeAdminUseCase
from pageaccess.application.use_cases.access.check_rate_limit import CheckRateLimitUseCase
from pageaccess.application.use_cases.access.get_user_context import GetUserContextUseCase
from pageaccess.application.use_cases.access.set_team_overrides import SetTeamOverridesUseCase
from pageaccess.application.use_cases.access.set_user_overrides import SetUserOverridesUseCase
from pageaccess.interfaces.api.app import create_app
from pageaccess.interfaces.api.middleware.auth import AuthMiddleware
from pageaccess.interfaces.api.middleware.cors import CORSMiddleware
from pageaccess.interfaces.api.middleware.request_logging import RequestLoggingMiddleware
from pageaccess.interfaces.api.resources.access_overrides import AccessOverridesResource
from pageaccess.interfaces.api.resources.health import HealthResource

ADMIN_TOKEN = "admin-token"
MEMBER_TOKEN = "member-token"


class StaticIdentityProvider:
    """Identity provider with a fixed token table."""

    def __init__(self) -> None:
        self.tokens: dict[str, Identity] = {}

    def resolve(self, token: str) -> Identity | None:
        return self.tokens.get(token)


@pytest.fixture
def identity_provider(admin, member) -> StaticIdentityProvider:
    provider = StaticIdentityProvider()
    provider.tokens[ADMIN_TOKEN] = Identity(user_id=str(admin.id))
    provider.tokens[MEMBER_TOKEN] = Identity(user_id=str(member.id))
    return provider


@pytest.fixture
def app(uow_factory, audit_trail, rate_limiter, identity_provider):
    """Falcon ASGI app wired to in-memory fakes."""
    resource = AccessOverridesResource(
        AuthorizeAdminUseCase(unit_of_work_factory=uow_factory),
        CheckRateLimitUseCase(rate_limiter, window_seconds=60, max_requests=60),
        GetUserContextUseCase(unit_of_work_factory=uow_factory),
        SetUserOverridesUseCase(unit_of_work_factory=uow_factory, audit_trail=audit_trail),
        SetTeamOverridesUseCase(unit_of_work_factory=uow_factory, audit_trail=audit_trail),
    )
    return create_app(
        resource,
        HealthResource(),
        middleware=[
            RequestLoggingMiddleware(),
            CORSMiddleware(["http://localhost:5173"]),
            AuthMiddleware(identity_provider),
        ],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def member_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {MEMBER_TOKEN}"}
