"""Repository ports."""

from accessperm.application.ports.repositories.access_info_repository import (
    AccessInfoRepository,
)
from accessperm.application.ports.repositories.access_permission_repository import (
    AccessPermissionRepository,
)

__all__ = [
    "AccessInfoRepository",
    "AccessPermissionRepository",
]
