"""Application validators."""

from accessperm.application.validators.argument_validator import not_null
from accessperm.application.validators.permission_validator import validate_permission

__all__ = [
    "not_null",
    "validate_permission",
]
