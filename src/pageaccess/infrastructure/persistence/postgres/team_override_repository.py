"""PostgreSQL team access override repository."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from pageaccess.domain.entities import TeamAccessOverride
from pageaccess.domain.value_objects import PageOverrides
from pageaccess.infrastructure.persistence.postgres.connection import store_errors

_COLUMNS = "team_id, allowed_pages_add, allowed_pages_remove, updated_at"


def _row_to_override(r: tuple) -> TeamAccessOverride:
    return TeamAccessOverride(
        team_id=r[0],
        allowed_pages_add=r[1],
        allowed_pages_remove=r[2],
        updated_at=r[3],
    )


class PostgresTeamOverrideRepository:
    """Team override repository implementation. One row per team."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_team_id(self, team_id: UUID) -> TeamAccessOverride | None:
        """Get override row for team."""
        with store_errors():
            cur = await self._conn.execute(
                f"SELECT {_COLUMNS} FROM team_access_overrides WHERE team_id = %s",
                (team_id,),
            )
            r = await cur.fetchone()
        if not r:
            return None
        return _row_to_override(r)

    async def list_by_team_ids(self, team_ids: list[UUID]) -> list[TeamAccessOverride]:
        """Override rows for the given teams. Teams without a row are skipped."""
        with store_errors():
            cur = await self._conn.execute(
                f"SELECT {_COLUMNS} FROM team_access_overrides WHERE team_id = ANY(%s) "
                "ORDER BY team_id",
                (list(team_ids),),
            )
            rows = await cur.fetchall()
        return [_row_to_override(r) for r in rows]

    async def upsert(
        self, team_id: UUID, overrides: PageOverrides, updated_at: datetime
    ) -> TeamAccessOverride:
        """Insert the team's row or replace its lists."""
        with store_errors():
            cur = await self._conn.execute(
                "INSERT INTO team_access_overrides "
                "(team_id, allowed_pages_add, allowed_pages_remove, updated_at) "
                "VALUES (%s, %s, %s, %s) "
                "ON CONFLICT (team_id) DO UPDATE SET "
                "allowed_pages_add = EXCLUDED.allowed_pages_add, "
                "allowed_pages_remove = EXCLUDED.allowed_pages_remove, "
                "updated_at = EXCLUDED.updated_at "
                f"RETURNING {_COLUMNS}",
                (
                    team_id,
                    overrides.allowed_pages_add,
                    overrides.allowed_pages_remove,
                    updated_at,
                ),
            )
            r = await cur.fetchone()
        return _row_to_override(r)
