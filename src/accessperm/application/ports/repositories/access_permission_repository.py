"""AccessPermission repository port."""

from typing import Protocol
from uuid import UUID

from accessperm.application.dto import AccessPermissionListResult, AccessPermissionQuery
from accessperm.domain.entities import AccessPermission
from accessperm.domain.value_objects import Permission


class AccessPermissionRepository(Protocol):
    """Port for access permission persistence."""

    async def get_by_id(
        self, scope_id: UUID, access_permission_id: UUID
    ) -> AccessPermission | None: ...

    async def get_matching(
        self, access_info_id: UUID, permission: Permission
    ) -> AccessPermission | None: ...

    async def list_by_user(self, user_id: str) -> list[AccessPermission]: ...

    async def create(self, access_permission: AccessPermission) -> AccessPermission: ...

    async def delete(self, access_permission_id: UUID) -> None: ...

    async def query(self, query: AccessPermissionQuery) -> AccessPermissionListResult: ...

    async def count(self, query: AccessPermissionQuery) -> int: ...
