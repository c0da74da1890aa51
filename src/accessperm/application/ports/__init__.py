"""Application ports - interfaces for external adapters."""

from accessperm.application.ports.authorization_service import AuthorizationService
from accessperm.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AuthorizationService",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
