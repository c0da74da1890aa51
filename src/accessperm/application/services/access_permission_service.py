"""Access permission service - grant, revoke and query access permissions."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from accessperm.application.dto import (
    AccessPermissionCreator,
    AccessPermissionListResult,
    AccessPermissionQuery,
)
from accessperm.application.ports import AuthorizationService
from accessperm.application.security_context import get_current_subject
from accessperm.application.validators import not_null, validate_permission
from accessperm.domain.entities import AccessInfo, AccessPermission
from accessperm.domain.exceptions import DuplicateEntity, NotFound
from accessperm.domain.value_objects import ACCESS_INFO_DOMAIN, Action, Permission
from accessperm.logging import get_logger

logger = get_logger(__name__)


def _access_info_permission(action: Action, scope_id: UUID) -> Permission:
    return Permission(domain=ACCESS_INFO_DOMAIN.name, action=action, target_scope_id=scope_id)


class AccessPermissionService:
    """Manages the permissions attached to access infos.

    Every operation checks that the caller holds the matching access_info
    permission in the target scope before touching the store.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        authorization_service: AuthorizationService,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorization = authorization_service

    async def create(self, creator: AccessPermissionCreator) -> AccessPermission:
        """Grant creator.permission through the access info creator.access_info_id.

        Granting a permission outside the creator's scope (or with no target
        scope at all) requires the caller to hold that permission too.
        """
        not_null(creator, "creator")
        not_null(creator.scope_id, "creator.scope_id")
        not_null(creator.access_info_id, "creator.access_info_id")
        not_null(creator.permission, "creator.permission")

        await self._authorization.check_permission(
            _access_info_permission(Action.WRITE, creator.scope_id)
        )

        permission = creator.permission
        if permission.target_scope_id is None or permission.target_scope_id != creator.scope_id:
            await self._authorization.check_permission(permission)

        validate_permission(permission)

        subject = get_current_subject()
        async with self._uow_factory() as uow:
            access_info = await uow.access_infos.get_by_id(creator.scope_id, creator.access_info_id)
            if access_info is None:
                raise NotFound(AccessInfo.TYPE, creator.access_info_id)

            if await uow.access_permissions.get_matching(creator.access_info_id, permission):
                raise DuplicateEntity(
                    f"Permission {permission} already granted to access info {creator.access_info_id}"
                )

            access_permission = AccessPermission(
                id=uuid4(),
                scope_id=creator.scope_id,
                access_info_id=creator.access_info_id,
                permission=permission,
                created_on=datetime.now(UTC),
                created_by=subject.user_id if subject else None,
            )
            await uow.access_permissions.create(access_permission)

        logger.info(
            "access_permission.created",
            access_permission_id=str(access_permission.id),
            scope_id=str(access_permission.scope_id),
            access_info_id=str(access_permission.access_info_id),
            permission=str(permission),
        )
        return access_permission

    async def delete(self, scope_id: UUID, access_permission_id: UUID) -> None:
        """Revoke an access permission. Raises NotFound if it does not exist in scope."""
        not_null(scope_id, "scope_id")
        not_null(access_permission_id, "access_permission_id")

        await self._authorization.check_permission(
            _access_info_permission(Action.DELETE, scope_id)
        )

        async with self._uow_factory() as uow:
            if await uow.access_permissions.get_by_id(scope_id, access_permission_id) is None:
                raise NotFound(AccessPermission.TYPE, access_permission_id)
            await uow.access_permissions.delete(access_permission_id)

        logger.info(
            "access_permission.deleted",
            access_permission_id=str(access_permission_id),
            scope_id=str(scope_id),
        )

    async def find(self, scope_id: UUID, access_permission_id: UUID) -> AccessPermission | None:
        not_null(scope_id, "scope_id")
        not_null(access_permission_id, "access_permission_id")

        await self._authorization.check_permission(
            _access_info_permission(Action.READ, scope_id)
        )

        async with self._uow_factory() as uow:
            return await uow.access_permissions.get_by_id(scope_id, access_permission_id)

    async def find_by_access_info_id(
        self, scope_id: UUID, access_info_id: UUID
    ) -> AccessPermissionListResult:
        """All permissions of one access info within scope_id."""
        not_null(scope_id, "scope_id")
        not_null(access_info_id, "access_info_id")

        query = AccessPermissionQuery(scope_id=scope_id, access_info_id=access_info_id)
        return await self.query(query)

    async def query(self, query: AccessPermissionQuery) -> AccessPermissionListResult:
        not_null(query, "query")
        not_null(query.scope_id, "query.scope_id")

        await self._authorization.check_permission(
            _access_info_permission(Action.READ, query.scope_id)
        )

        async with self._uow_factory() as uow:
            return await uow.access_permissions.query(query)

    async def count(self, query: AccessPermissionQuery) -> int:
        not_null(query, "query")
        not_null(query.scope_id, "query.scope_id")

        await self._authorization.check_permission(
            _access_info_permission(Action.READ, query.scope_id)
        )

        async with self._uow_factory() as uow:
            return await uow.access_permissions.count(query)
