"""Composition root tests."""

from falcon.testing import TestClient

from accessperm.config import Settings
from accessperm.main import create_accessperm_app


def test_create_app_serves_health() -> None:
    """The app builds without touching the database and serves liveness."""
    app = create_accessperm_app(Settings(_env_file=None, log_renderer="json"))
    result = TestClient(app).simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_create_app_rejects_malformed_scope_id() -> None:
    """Malformed scope ids are rejected before any database access."""
    app = create_accessperm_app(Settings(_env_file=None, log_renderer="json"))
    result = TestClient(app).simulate_get("/v1/scopes/not-a-uuid/access-permissions")
    assert result.status_code == 400
