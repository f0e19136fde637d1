"""Unit tests for application settings configuration."""

from pathlib import Path

from catalog.config import Settings
from catalog.infrastructure.database.session import _get_async_url


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_paging_settings_can_be_overridden_from_environment(monkeypatch):
    monkeypatch.setenv("PAGE_SIZE", "25")
    monkeypatch.setenv("LOG_LEVEL_RECONCILE", "DEBUG")

    settings = Settings()

    assert settings.page_size == 25
    assert settings.log_level_reconcile == "DEBUG"


def test_database_urls_are_mapped_to_async_drivers():
    assert _get_async_url("sqlite:///./music_groups.db") == "sqlite+aiosqlite:///./music_groups.db"
    assert _get_async_url("postgresql://u:p@db/music") == "postgresql+asyncpg://u:p@db/music"
