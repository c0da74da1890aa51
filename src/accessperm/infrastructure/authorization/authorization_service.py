"""Authorization service backed by the caller's own access permissions."""

from accessperm.application.security_context import get_current_subject
from accessperm.domain.exceptions import PermissionDenied
from accessperm.domain.value_objects import Permission
from accessperm.logging import get_logger

logger = get_logger(__name__)


class AccessPermissionAuthorizationService:
    """Checks the current caller against the permissions granted to their access infos."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def is_permitted(self, permission: Permission) -> bool:
        """Check if the current caller holds a permission implying ``permission``."""
        subject = get_current_subject()
        if subject is None:
            return False

        async with self._uow_factory() as uow:
            granted = await uow.access_permissions.list_by_user(subject.user_id)
        return any(ap.permission.implies(permission) for ap in granted)

    async def check_permission(self, permission: Permission) -> None:
        """Raise PermissionDenied unless the current caller holds ``permission``."""
        if await self.is_permitted(permission):
            return
        subject = get_current_subject()
        logger.warning(
            "authorization.denied",
            user_id=subject.user_id if subject else None,
            permission=str(permission),
        )
        raise PermissionDenied(f"User does not have permission: {permission}")
