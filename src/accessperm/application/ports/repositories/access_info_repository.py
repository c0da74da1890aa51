"""AccessInfo repository port."""

from typing import Protocol
from uuid import UUID

from accessperm.domain.entities import AccessInfo


class AccessInfoRepository(Protocol):
    """Port for reading access infos."""

    async def get_by_id(self, scope_id: UUID, access_info_id: UUID) -> AccessInfo | None: ...
