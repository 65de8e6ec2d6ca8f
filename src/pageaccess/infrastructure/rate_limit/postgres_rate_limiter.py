"""Sliding-window rate limiter stored in PostgreSQL."""

from psycopg_pool import AsyncConnectionPool

from pageaccess.infrastructure.persistence.postgres.connection import (
    get_connection,
    store_errors,
)


class PostgresRateLimiter:
    """Counts requests per key in ``rate_limit_event``.

    Each hit runs in its own transaction under an advisory lock on the key, so
    concurrent hits for one key are serialized. Rejected hits are not recorded.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def hit(self, key: str, window_seconds: int, max_requests: int) -> bool:
        with store_errors():
            async with get_connection(self._pool) as conn:
                async with conn.transaction():
                    await conn.execute(
                        "SELECT pg_advisory_xact_lock(hashtext(%s))",
                        (key,),
                    )
                    await conn.execute(
                        "DELETE FROM rate_limit_event "
                        "WHERE key = %s AND created_at <= now() - %s * interval '1 second'",
                        (key, window_seconds),
                    )
                    cur = await conn.execute(
                        "SELECT count(*) FROM rate_limit_event WHERE key = %s",
                        (key,),
                    )
                    (count,) = await cur.fetchone()
                    if count >= max_requests:
                        return False
                    await conn.execute(
                        "INSERT INTO rate_limit_event (key, created_at) VALUES (%s, now())",
                        (key,),
                    )
        return True
