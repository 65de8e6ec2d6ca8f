"""PostgreSQL team and team membership repositories."""

from uuid import UUID

from psycopg import AsyncConnection

from pageaccess.domain.entities import Team
from pageaccess.infrastructure.persistence.postgres.connection import store_errors


class PostgresTeamRepository:
    """Team repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, team_id: UUID) -> Team | None:
        """Get team by id."""
        with store_errors():
            cur = await self._conn.execute(
                "SELECT id, name FROM teams WHERE id = %s",
                (team_id,),
            )
            r = await cur.fetchone()
        if not r:
            return None
        return Team(id=r[0], name=r[1])


class PostgresTeamMembershipRepository:
    """Team membership repository implementation (read-only)."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_team_ids(self, user_id: UUID) -> list[UUID]:
        """Ids of teams the user belongs to, in membership order."""
        with store_errors():
            cur = await self._conn.execute(
                "SELECT team_id FROM team_members WHERE user_id = %s ORDER BY created_at, team_id",
                (user_id,),
            )
            rows = await cur.fetchall()
        return [r[0] for r in rows if r[0]]
