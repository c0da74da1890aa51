"""Domain entities."""

from accessperm.domain.entities.access_info import AccessInfo
from accessperm.domain.entities.access_permission import AccessPermission

__all__ = [
    "AccessInfo",
    "AccessPermission",
]
