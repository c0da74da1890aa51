"""AccessPermission entity - permission granted through an AccessInfo."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from accessperm.domain.value_objects import Permission


@dataclass(frozen=True)
class AccessPermission:
    """AccessPermission - binds a Permission to an AccessInfo. Immutable once created."""

    TYPE = "AccessPermission"

    id: UUID
    scope_id: UUID
    access_info_id: UUID
    permission: Permission
    created_on: datetime
    created_by: str | None = None
