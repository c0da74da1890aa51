"""Subject - the authenticated caller."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Subject:
    """Caller on whose behalf an operation runs."""

    user_id: str
    username: str | None = None
