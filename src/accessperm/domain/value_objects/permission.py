"""Permission value object - (domain, action, target scope) grant."""

from dataclasses import dataclass
from uuid import UUID

from accessperm.domain.value_objects.action import Action

WILDCARD = "*"


@dataclass(frozen=True)
class Permission:
    """Permission on a domain.

    Any field left as None matches every value when the permission is held,
    so Permission(domain="device") grants every action on devices in every
    scope.
    """

    domain: str | None = None
    action: Action | None = None
    target_scope_id: UUID | None = None
    group_id: UUID | None = None

    def implies(self, other: "Permission") -> bool:
        """True if holding this permission is enough to perform ``other``."""
        for held, required in (
            (self.domain, other.domain),
            (self.action, other.action),
            (self.target_scope_id, other.target_scope_id),
            (self.group_id, other.group_id),
        ):
            if held is not None and held != required:
                return False
        return True

    def __str__(self) -> str:
        parts = (self.domain, self.action, self.target_scope_id, self.group_id)
        return ":".join(WILDCARD if p is None else str(p) for p in parts)
