"""Application entry point and composition root."""

import falcon.asgi

from pageaccess import __version__
from pageaccess.application.audit_trail import AuditTrail
from pageaccess.application.use_cases.access.authorize_admin import AuthorizeAdminUseCase
from pageaccess.application.use_cases.access.check_rate_limit import CheckRateLimitUseCase
from pageaccess.application.use_cases.access.get_user_context import GetUserContextUseCase
from pageaccess.application.use_cases.access.set_team_overrides import SetTeamOverridesUseCase
from pageaccess.application.use_cases.access.set_user_overrides import SetUserOverridesUseCase
from pageaccess.config import Settings, get_settings
from pageaccess.infrastructure.auth.keycloak_provider import KeycloakProvider
from pageaccess.infrastructure.persistence.postgres.connection import create_pool
from pageaccess.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from pageaccess.infrastructure.rate_limit.postgres_rate_limiter import PostgresRateLimiter
from pageaccess.interfaces.api.app import create_app
from pageaccess.interfaces.api.middleware.auth import AuthMiddleware
from pageaccess.interfaces.api.middleware.cors import CORSMiddleware
from pageaccess.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from pageaccess.interfaces.api.middleware.request_logging import RequestLoggingMiddleware
from pageaccess.interfaces.api.resources.access_overrides import AccessOverridesResource
from pageaccess.interfaces.api.resources.health import HealthResource
from pageaccess.logging_config import configure_logging


def create_pageaccess_app(settings: Settings | None = None) -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, json_logs=settings.log_json)

    pool = create_pool(settings.database_url)
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )

    audit_trail = AuditTrail(uow_factory)
    authorize_admin = AuthorizeAdminUseCase(unit_of_work_factory=uow_factory)
    check_rate_limit = CheckRateLimitUseCase(
        rate_limiter=PostgresRateLimiter(pool),
        window_seconds=settings.rate_limit_window_seconds,
        max_requests=settings.rate_limit_max_requests,
    )
    get_user_context = GetUserContextUseCase(unit_of_work_factory=uow_factory)
    set_user_overrides = SetUserOverridesUseCase(
        unit_of_work_factory=uow_factory,
        audit_trail=audit_trail,
        dashboard_prefix=settings.dashboard_path_prefix,
    )
    set_team_overrides = SetTeamOverridesUseCase(
        unit_of_work_factory=uow_factory,
        audit_trail=audit_trail,
        dashboard_prefix=settings.dashboard_path_prefix,
    )

    access_overrides_resource = AccessOverridesResource(
        authorize_admin,
        check_rate_limit,
        get_user_context,
        set_user_overrides,
        set_team_overrides,
    )
    health_resource = HealthResource(pool)

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    return create_app(
        access_overrides_resource,
        health_resource,
        middleware=[
            RequestLoggingMiddleware(),
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )


def main() -> None:
    """CLI entry point - serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    print(f"pageaccess v{__version__}")
    uvicorn.run(
        create_pageaccess_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
