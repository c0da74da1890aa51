"""AccessInfo entity - access-control record of a user within a scope."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class AccessInfo:
    """AccessInfo - groups the permissions granted to one user."""

    TYPE = "AccessInfo"

    id: UUID
    scope_id: UUID
    user_id: str
    created_on: datetime
    created_by: str | None = None
