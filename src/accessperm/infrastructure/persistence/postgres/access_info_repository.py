"""PostgreSQL access info repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from accessperm.domain.entities import AccessInfo

_COLUMNS = "id, scope_id, user_id, created_on, created_by"


def _row_to_access_info(r: tuple) -> AccessInfo:
    return AccessInfo(id=r[0], scope_id=r[1], user_id=r[2], created_on=r[3], created_by=r[4])


class PostgresAccessInfoRepository:
    """Access info repository implementation (read only)."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, scope_id: UUID, access_info_id: UUID) -> AccessInfo | None:
        """Get access info by id within scope."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM access_info WHERE scope_id = %s AND id = %s",
            (scope_id, access_info_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_access_info(r)
