"""PostgreSQL access permission repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from accessperm.application.dto import AccessPermissionListResult, AccessPermissionQuery
from accessperm.domain.entities import AccessPermission
from accessperm.domain.exceptions import DuplicateEntity
from accessperm.domain.value_objects import Action, Permission

_FIELDS = (
    "id", "scope_id", "access_info_id", "domain", "action", "target_scope_id", "group_id",
    "created_on", "created_by",
)
_COLUMNS = ", ".join(_FIELDS)


def _row_to_access_permission(r: tuple) -> AccessPermission:
    return AccessPermission(
        id=r[0],
        scope_id=r[1],
        access_info_id=r[2],
        permission=Permission(
            domain=r[3],
            action=Action(r[4]) if r[4] is not None else None,
            target_scope_id=r[5],
            group_id=r[6],
        ),
        created_on=r[7],
        created_by=r[8],
    )


def _build_query_conditions(query: AccessPermissionQuery) -> tuple[list[str], list[object]]:
    """Build SQL AND conditions and params for a query. Returns (conditions, params)."""
    conditions = ["scope_id = %s"]
    params: list[object] = [query.scope_id]
    if query.access_info_id is not None:
        conditions.append("access_info_id = %s")
        params.append(query.access_info_id)
    if query.domain is not None:
        conditions.append("domain = %s")
        params.append(query.domain)
    if query.action is not None:
        conditions.append("action = %s")
        params.append(str(query.action))
    return conditions, params


def _nullable_eq(column: str) -> str:
    return f"{column} IS NOT DISTINCT FROM %s"


class PostgresAccessPermissionRepository:
    """Access permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(
        self, scope_id: UUID, access_permission_id: UUID
    ) -> AccessPermission | None:
        """Get access permission by id within scope."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM access_permission WHERE scope_id = %s AND id = %s",
            (scope_id, access_permission_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_access_permission(r)

    async def get_matching(
        self, access_info_id: UUID, permission: Permission
    ) -> AccessPermission | None:
        """Get the access permission granting exactly ``permission`` to the access info."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM access_permission WHERE access_info_id = %s AND "
            + " AND ".join(
                _nullable_eq(c) for c in ("domain", "action", "target_scope_id", "group_id")
            ),
            (
                access_info_id,
                permission.domain,
                str(permission.action) if permission.action is not None else None,
                permission.target_scope_id,
                permission.group_id,
            ),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_access_permission(r)

    async def list_by_user(self, user_id: str) -> list[AccessPermission]:
        """List access permissions granted through any access info of the user."""
        columns = ", ".join(f"ap.{c}" for c in _FIELDS)
        cur = await self._conn.execute(
            f"SELECT {columns} FROM access_permission ap "
            "JOIN access_info ai ON ai.id = ap.access_info_id WHERE ai.user_id = %s",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_access_permission(r) for r in rows]

    async def create(self, access_permission: AccessPermission) -> AccessPermission:
        """Create access permission. Raises DuplicateEntity if the grant already exists."""
        p = access_permission.permission
        try:
            await self._conn.execute(
                f"INSERT INTO access_permission ({_COLUMNS}) "
                "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)",
                (
                    access_permission.id,
                    access_permission.scope_id,
                    access_permission.access_info_id,
                    p.domain,
                    str(p.action) if p.action is not None else None,
                    p.target_scope_id,
                    p.group_id,
                    access_permission.created_on,
                    access_permission.created_by,
                ),
            )
        except UniqueViolation:
            raise DuplicateEntity(
                f"Permission {p} already granted to access info {access_permission.access_info_id}"
            ) from None
        return access_permission

    async def delete(self, access_permission_id: UUID) -> None:
        """Delete access permission."""
        await self._conn.execute(
            "DELETE FROM access_permission WHERE id = %s",
            (access_permission_id,),
        )

    async def query(self, query: AccessPermissionQuery) -> AccessPermissionListResult:
        """Query access permissions, ordered by creation time."""
        conditions, params = _build_query_conditions(query)
        sql = (
            f"SELECT {_COLUMNS} FROM access_permission WHERE {' AND '.join(conditions)} "
            "ORDER BY created_on, id OFFSET %s"
        )
        params.append(query.offset)
        if query.limit is not None:
            # One extra row tells whether the limit was exceeded
            sql += " LIMIT %s"
            params.append(query.limit + 1)

        cur = await self._conn.execute(sql, params)
        rows = await cur.fetchall()
        items = [_row_to_access_permission(r) for r in rows]
        if query.limit is not None and len(items) > query.limit:
            return AccessPermissionListResult(items=items[: query.limit], limit_exceeded=True)
        return AccessPermissionListResult(items=items)

    async def count(self, query: AccessPermissionQuery) -> int:
        """Count access permissions matching query filters (paging ignored)."""
        conditions, params = _build_query_conditions(query)
        cur = await self._conn.execute(
            f"SELECT COUNT(*) FROM access_permission WHERE {' AND '.join(conditions)}",
            params,
        )
        r = await cur.fetchone()
        return r[0] if r else 0
