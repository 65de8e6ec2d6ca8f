"""PostgreSQL profile repository implementation."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from pageaccess.domain.entities import Profile
from pageaccess.domain.value_objects import PageOverrides, UserRole
from pageaccess.infrastructure.persistence.postgres.connection import store_errors

_COLUMNS = "id, role, allowed_pages_add, allowed_pages_remove, updated_at"


def _parse_role(value: str | None) -> UserRole:
    try:
        return UserRole(value)
    except ValueError:
        return UserRole.MEMBER


def _row_to_profile(r: tuple) -> Profile:
    return Profile(
        id=r[0],
        role=_parse_role(r[1]),
        allowed_pages_add=r[2],
        allowed_pages_remove=r[3],
        updated_at=r[4],
    )


class PostgresProfileRepository:
    """Profile repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: UUID) -> Profile | None:
        """Get profile by user id."""
        with store_errors():
            cur = await self._conn.execute(
                f"SELECT {_COLUMNS} FROM profiles WHERE id = %s",
                (user_id,),
            )
            r = await cur.fetchone()
        if not r:
            return None
        return _row_to_profile(r)

    async def update_overrides(
        self, user_id: UUID, overrides: PageOverrides, updated_at: datetime
    ) -> Profile | None:
        """Replace both override lists. Returns None if the profile is gone."""
        with store_errors():
            cur = await self._conn.execute(
                "UPDATE profiles SET allowed_pages_add = %s, allowed_pages_remove = %s, "
                f"updated_at = %s WHERE id = %s RETURNING {_COLUMNS}",
                (
                    overrides.allowed_pages_add,
                    overrides.allowed_pages_remove,
                    updated_at,
                    user_id,
                ),
            )
            r = await cur.fetchone()
        if not r:
            return None
        return _row_to_profile(r)
