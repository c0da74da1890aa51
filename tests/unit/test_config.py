"""Unit tests for Settings."""

import pytest

from accessperm.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url.startswith("postgresql://")
    assert settings.environment == "development"
    assert settings.log_renderer == "auto"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/x")
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "20")
    settings = Settings(_env_file=None)
    assert settings.database_url == "postgresql://u:p@db:5432/x"
    assert settings.environment == "production"
    assert settings.db_pool_max_size == 20
