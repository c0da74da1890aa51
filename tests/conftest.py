"""Pytest fixtures for accessperm tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from accessperm.application.dto import AccessPermissionListResult, AccessPermissionQuery
from accessperm.domain.entities import AccessInfo, AccessPermission
from accessperm.domain.exceptions import DuplicateEntity
from accessperm.domain.value_objects import Permission


# --- Fake repositories ---


class FakeAccessInfoRepository:
    """In-memory access info repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, AccessInfo] = {}

    async def get_by_id(self, scope_id: UUID, access_info_id: UUID) -> AccessInfo | None:
        info = self._by_id.get(access_info_id)
        if info is None or info.scope_id != scope_id:
            return None
        return info

    def add(self, scope_id: UUID, user_id: str) -> AccessInfo:
        """Helper to add access info for tests."""
        info = AccessInfo(
            id=uuid4(),
            scope_id=scope_id,
            user_id=user_id,
            created_on=datetime.now(UTC),
        )
        self._by_id[info.id] = info
        return info


class FakeAccessPermissionRepository:
    """In-memory access permission repository."""

    def __init__(self, access_infos: FakeAccessInfoRepository) -> None:
        self._access_infos = access_infos
        self._by_id: dict[UUID, AccessPermission] = {}

    async def get_by_id(
        self, scope_id: UUID, access_permission_id: UUID
    ) -> AccessPermission | None:
        ap = self._by_id.get(access_permission_id)
        if ap is None or ap.scope_id != scope_id:
            return None
        return ap

    def _find_matching(
        self, access_info_id: UUID, permission: Permission
    ) -> AccessPermission | None:
        for ap in self._by_id.values():
            if ap.access_info_id == access_info_id and ap.permission == permission:
                return ap
        return None

    async def get_matching(
        self, access_info_id: UUID, permission: Permission
    ) -> AccessPermission | None:
        return self._find_matching(access_info_id, permission)

    async def list_by_user(self, user_id: str) -> list[AccessPermission]:
        infos = {i.id for i in self._access_infos._by_id.values() if i.user_id == user_id}
        return [ap for ap in self._by_id.values() if ap.access_info_id in infos]

    async def create(self, access_permission: AccessPermission) -> AccessPermission:
        if self._find_matching(access_permission.access_info_id, access_permission.permission):
            raise DuplicateEntity(f"Permission {access_permission.permission} already granted")
        self._by_id[access_permission.id] = access_permission
        return access_permission

    async def delete(self, access_permission_id: UUID) -> None:
        self._by_id.pop(access_permission_id, None)

    def _matches(self, query: AccessPermissionQuery) -> list[AccessPermission]:
        items = [
            ap
            for ap in self._by_id.values()
            if ap.scope_id == query.scope_id
            and (query.access_info_id is None or ap.access_info_id == query.access_info_id)
            and (query.domain is None or ap.permission.domain == query.domain)
            and (query.action is None or ap.permission.action == query.action)
        ]
        items.sort(key=lambda ap: (ap.created_on, ap.id))
        return items

    async def query(self, query: AccessPermissionQuery) -> AccessPermissionListResult:
        items = self._matches(query)[query.offset :]
        if query.limit is not None and len(items) > query.limit:
            return AccessPermissionListResult(items=items[: query.limit], limit_exceeded=True)
        return AccessPermissionListResult(items=items)

    async def count(self, query: AccessPermissionQuery) -> int:
        return len(self._matches(query))

    def add(
        self, scope_id: UUID, access_info_id: UUID, permission: Permission
    ) -> AccessPermission:
        """Helper to add access permission for tests."""
        ap = AccessPermission(
            id=uuid4(),
            scope_id=scope_id,
            access_info_id=access_info_id,
            permission=permission,
            created_on=datetime.now(UTC),
        )
        self._by_id[ap.id] = ap
        return ap

    def all(self) -> list[AccessPermission]:
        return list(self._by_id.values())


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.access_infos = FakeAccessInfoRepository()
        self.access_permissions = FakeAccessPermissionRepository(self.access_infos)
        self.entered = 0

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory that yields the same FakeUnitOfWork on every call and counts entries."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        uow.entered += 1
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def mock_authorization_service():
    """AsyncMock for AuthorizationService - permits everything by default."""
    mock = AsyncMock()
    mock.check_permission.return_value = None
    mock.is_permitted.return_value = True
    return mock


@pytest.fixture
def scope_id() -> UUID:
    return uuid4()
