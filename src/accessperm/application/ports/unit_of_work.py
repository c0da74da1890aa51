"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from accessperm.application.ports.repositories.access_info_repository import (
    AccessInfoRepository,
)
from accessperm.application.ports.repositories.access_permission_repository import (
    AccessPermissionRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def access_infos(self) -> AccessInfoRepository: ...

    @property
    def access_permissions(self) -> AccessPermissionRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
