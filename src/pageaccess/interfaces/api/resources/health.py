"""Health check endpoints."""

import falcon.asgi
import structlog
from psycopg_pool import AsyncConnectionPool

from pageaccess.domain.exceptions import RepositoryError
from pageaccess.infrastructure.persistence.postgres.connection import (
    get_connection,
    store_errors,
)

logger = structlog.get_logger()


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, pool: AsyncConnectionPool | None = None) -> None:
        self._pool = pool

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (database reachable)."""
        if self._pool is not None:
            try:
                with store_errors():
                    async with get_connection(self._pool) as conn:
                        await conn.execute("SELECT 1")
            except RepositoryError as e:
                logger.warning("readiness_check_failed", error=str(e))
                resp.media = {"status": "unavailable"}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
