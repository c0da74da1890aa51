"""Actions that can be granted on a domain."""

from enum import StrEnum


class Action(StrEnum):
    """Actions that can be performed on protected resources."""

    READ = "read"
    WRITE = "write"
    DELETE = "delete"
    CONNECT = "connect"
    EXECUTE = "execute"
