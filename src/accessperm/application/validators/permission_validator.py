"""Permission shape validation against the domain registry."""

from accessperm.domain.exceptions import ValidationError
from accessperm.domain.value_objects import Permission, get_domain


def validate_permission(permission: Permission) -> None:
    """Validate that the permission names a known domain and a supported action.

    Raises:
        ValidationError: unknown domain, action not supported by the domain,
            or group set on a domain whose resources cannot be grouped.
    """
    domain = None
    if permission.domain is not None:
        domain = get_domain(permission.domain)
        if domain is None:
            raise ValidationError(
                f"Unknown domain: {permission.domain}", argument="permission.domain"
            )
        if permission.action is not None and not domain.supports(permission.action):
            raise ValidationError(
                f"Action {permission.action} is not supported by domain {domain.name}",
                argument="permission.action",
            )

    if permission.group_id is not None and (domain is None or not domain.groupable):
        raise ValidationError(
            "Group can only be set on a groupable domain", argument="permission.group_id"
        )
