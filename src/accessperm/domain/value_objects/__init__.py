"""Domain value objects."""

from accessperm.domain.value_objects.action import Action
from accessperm.domain.value_objects.domain import (
    ACCESS_INFO_DOMAIN,
    KNOWN_DOMAINS,
    Domain,
    get_domain,
)
from accessperm.domain.value_objects.permission import Permission
from accessperm.domain.value_objects.subject import Subject

__all__ = [
    "ACCESS_INFO_DOMAIN",
    "KNOWN_DOMAINS",
    "Action",
    "Domain",
    "Permission",
    "Subject",
    "get_domain",
]
