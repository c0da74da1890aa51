"""Domain exceptions."""

from uuid import UUID


class AccessPermError(Exception):
    """Base exception for accessperm."""

    pass


class PermissionDenied(AccessPermError):
    """Caller does not hold the permission required for the requested action."""

    pass


class NotFound(AccessPermError):
    """Requested entity was not found."""

    def __init__(self, entity_type: str, entity_id: UUID | str) -> None:
        super().__init__(f"{entity_type} not found: {entity_id}")
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateEntity(AccessPermError):
    """Entity with the same identifying fields already exists."""

    pass


class ValidationError(AccessPermError):
    """Validation failed for input data."""

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument
