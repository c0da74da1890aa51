"""Access permission assignment service."""

__version__ = "0.1.0"
