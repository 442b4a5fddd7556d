"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from outlook_mail.core.config import (
    FILE_ATTACHMENT_TYPE,
    OutlookSettings,
    load_app_settings,
)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Ensure each test sees a fresh settings instance."""

    load_app_settings.cache_clear()


def test_defaults_loaded_without_env_file() -> None:
    """Default values should be returned when no overrides are present."""

    settings = load_app_settings(include_environment=False)
    assert settings.outlook.base_url == "https://outlook.office.com"
    assert settings.outlook.access_token is None
    assert settings.outlook.timeout_seconds == 15
    assert settings.outlook.attachment_type == FILE_ATTACHMENT_TYPE
    assert settings.logging.level == "INFO"


def test_env_file_overrides(tmp_path: Path) -> None:
    """Values defined in an env file should override defaults."""

    env_file = tmp_path / "test.env"
    env_file.write_text(
        "OUTLOOK_MAIL_OUTLOOK__ACCESS_TOKEN=abc123\n"
        "OUTLOOK_MAIL_OUTLOOK__TIMEOUT_SECONDS=5\n"
        "OUTLOOK_MAIL_LOGGING__STRUCTURED=true\n"
        "UNRELATED_KEY=ignored\n",
        encoding="utf-8",
    )

    settings = load_app_settings(env_file=env_file, include_environment=False)
    assert settings.outlook.access_token == "abc123"
    assert settings.outlook.timeout_seconds == 5
    assert settings.logging.structured is True


def test_environment_wins_over_env_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Process environment should take precedence over the env file."""

    env_file = tmp_path / "test.env"
    env_file.write_text("OUTLOOK_MAIL_OUTLOOK__ACCESS_TOKEN=from-file\n", encoding="utf-8")
    monkeypatch.setenv("OUTLOOK_MAIL_OUTLOOK__ACCESS_TOKEN", "from-env")

    settings = load_app_settings(env_file=env_file)
    assert settings.outlook.access_token == "from-env"


def test_empty_token_becomes_none(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTLOOK_MAIL_OUTLOOK__ACCESS_TOKEN", "")

    settings = load_app_settings()
    assert settings.outlook.access_token is None


def test_non_positive_timeout_rejected() -> None:
    with pytest.raises(ValidationError):
        OutlookSettings(timeout_seconds=0)
