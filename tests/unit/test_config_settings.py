"""Unit tests for application settings configuration."""

from pathlib import Path

import pytest

from article_world.config import Settings
from article_world.infrastructure.database.session import get_async_url


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-root .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://user:pw@db:5432/articles")
    monkeypatch.setenv("CORS_ORIGINS", '["http://example.com"]')
    monkeypatch.setenv("PORT", "9000")

    settings = Settings()

    assert settings.database_url == "postgresql://user:pw@db:5432/articles"
    assert settings.cors_origins == ["http://example.com"]
    assert settings.port == 9000


def test_async_url_rewrites_sync_drivers():
    assert get_async_url("sqlite:///./a.db") == "sqlite+aiosqlite:///./a.db"
    assert get_async_url("postgresql://u@h/db") == "postgresql+asyncpg://u@h/db"
    assert get_async_url("sqlite+aiosqlite:///:memory:") == "sqlite+aiosqlite:///:memory:"
    assert get_async_url("postgres://u@h/db") == "postgresql+asyncpg://u@h/db"


def test_async_url_rejects_unsupported_scheme():
    with pytest.raises(ValueError, match="mysql"):
        get_async_url("mysql://u@h/db")
