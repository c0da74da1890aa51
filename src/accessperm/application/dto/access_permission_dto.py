"""Access permission DTOs - creator, query and list result."""

from dataclasses import dataclass, field
from uuid import UUID

from accessperm.domain.entities import AccessPermission
from accessperm.domain.value_objects import Action, Permission


@dataclass
class AccessPermissionCreator:
    """Input for creating an access permission."""

    scope_id: UUID | None
    access_info_id: UUID | None
    permission: Permission | None


@dataclass
class AccessPermissionQuery:
    """Query over access permissions of one scope.

    Filters left as None are not applied. limit=None returns every match.
    """

    scope_id: UUID | None
    access_info_id: UUID | None = None
    domain: str | None = None
    action: Action | None = None
    offset: int = 0
    limit: int | None = None


@dataclass
class AccessPermissionListResult:
    """Page of access permissions."""

    items: list[AccessPermission] = field(default_factory=list)
    limit_exceeded: bool = False

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)
