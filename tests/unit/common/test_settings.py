from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from wayfinder.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a stray .env in the repository from leaking into settings."""
    monkeypatch.chdir(tmp_path)


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.app.project_name == "wayfinder"
    assert settings.app.environment == "prod"
    assert settings.logging.enabled is True
    assert settings.logging.log_level == "WARNING"
    assert settings.logging.log_file is None


def test_settings_read_nested_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WAYFINDER_LOGGING__LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("WAYFINDER_LOGGING__FORMAT", "json")
    monkeypatch.setenv("WAYFINDER_APP__ENVIRONMENT", "dev")

    settings = Settings()

    assert settings.logging.log_level == "DEBUG"
    assert settings.logging.format == "json"
    # Partial update keeps the remaining defaults
    assert settings.logging.enabled is True
    assert settings.app.environment == "dev"


def test_settings_read_dotenv_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("WAYFINDER_LOGGING__ENABLED=false\n", encoding="utf-8")

    settings = Settings()

    assert settings.logging.enabled is False


def test_settings_reject_invalid_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WAYFINDER_LOGGING__LOG_LEVEL", "LOUD")

    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_returns_singleton() -> None:
    assert get_settings() is get_settings()
