"""Fixtures for API tests."""

from uuid import uuid4

import falcon.asgi
import pytest
from falcon.testing import TestClient

from accessperm.application.services.access_permission_service import AccessPermissionService
from accessperm.domain.value_objects import Permission, Subject
from accessperm.infrastructure.authorization.authorization_service import (
    AccessPermissionAuthorizationService,
)
from accessperm.interfaces.api.errors import register_error_handlers
from accessperm.interfaces.api.middleware.auth import AuthMiddleware
from accessperm.interfaces.api.middleware.cors import CORSMiddleware
from accessperm.interfaces.api.resources.health import HealthResource
from accessperm.main import add_routes

ADMIN_TOKEN = "admin-token"
USER_TOKEN = "user-token"


class FakeKeycloakProvider:
    """Resolves fixed tokens to subjects."""

    _users = {
        ADMIN_TOKEN: Subject(user_id="admin-1", username="admin"),
        USER_TOKEN: Subject(user_id="user-1", username="user"),
    }

    def decode_token(self, token: str) -> Subject | None:
        return self._users.get(token)


@pytest.fixture
def admin_scope_id():
    return uuid4()


@pytest.fixture
def target_access_info(fake_uow, admin_scope_id):
    """Access info of user-2 that tests grant permissions to."""
    return fake_uow.access_infos.add(admin_scope_id, "user-2")


@pytest.fixture
def app(fake_uow, uow_factory, admin_scope_id):
    """Falcon ASGI app over the in-memory store; admin-1 holds every permission."""
    admin_info = fake_uow.access_infos.add(admin_scope_id, "admin-1")
    fake_uow.access_permissions.add(admin_scope_id, admin_info.id, Permission())

    service = AccessPermissionService(
        unit_of_work_factory=uow_factory,
        authorization_service=AccessPermissionAuthorizationService(uow_factory),
    )
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(["http://console.local"]),
            AuthMiddleware(FakeKeycloakProvider()),
        ]
    )
    register_error_handlers(app)
    add_routes(app, service, HealthResource())
    return app


@pytest.fixture
def client(app) -> TestClient:
    """Test client authenticated as admin-1."""
    return TestClient(app, headers={"Authorization": f"Bearer {ADMIN_TOKEN}"})


@pytest.fixture
def anonymous_client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def user_client(app) -> TestClient:
    """Test client authenticated as user-1, who holds nothing unless a test grants it."""
    return TestClient(app, headers={"Authorization": f"Bearer {USER_TOKEN}"})
