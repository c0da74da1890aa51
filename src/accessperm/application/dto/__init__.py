"""Application DTOs."""

from accessperm.application.dto.access_permission_dto import (
    AccessPermissionCreator,
    AccessPermissionListResult,
    AccessPermissionQuery,
)

__all__ = [
    "AccessPermissionCreator",
    "AccessPermissionListResult",
    "AccessPermissionQuery",
]
