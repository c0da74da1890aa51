"""Argument validation helpers."""

from accessperm.domain.exceptions import ValidationError


def not_null(value: object, argument: str) -> None:
    """Raise ValidationError if value is None."""
    if value is None:
        raise ValidationError(f"{argument} must not be null", argument=argument)
