"""Rate limit use case - per-admin sliding window."""

from uuid import UUID

import structlog

from pageaccess.application.ports import RateLimiter
from pageaccess.domain.exceptions import RateLimited, RepositoryError, StoreError

logger = structlog.get_logger()

RATE_KEY_PREFIX = "admin-access-overrides:"


class CheckRateLimitUseCase:
    """Consume one request slot for the admin or raise RateLimited."""

    def __init__(
        self,
        rate_limiter: RateLimiter,
        window_seconds: int = 60,
        max_requests: int = 60,
    ) -> None:
        self._limiter = rate_limiter
        self._window_seconds = window_seconds
        self._max_requests = max_requests

    async def execute(self, admin_id: UUID) -> None:
        key = f"{RATE_KEY_PREFIX}{admin_id}"
        try:
            allowed = await self._limiter.hit(key, self._window_seconds, self._max_requests)
        except RepositoryError as e:
            logger.error("rate_limit_unavailable", key=key, error=str(e))
            raise StoreError("rate_limit_unavailable") from e
        if not allowed:
            logger.info("rate_limited", key=key)
            raise RateLimited()
