"""Authorization service port - checks the current caller's permissions."""

from typing import Protocol

from accessperm.domain.value_objects import Permission


class AuthorizationService(Protocol):
    """Port for checking the current caller's permissions."""

    async def is_permitted(self, permission: Permission) -> bool: ...

    async def check_permission(self, permission: Permission) -> None:
        """Raise PermissionDenied unless the caller holds ``permission``."""
        ...
