"""Unit tests for environment-backed settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from auntie_bot.config import ConfigurationError, Settings

_ENV_NAMES = (
    "TELEGRAM_TOKEN",
    "TELEGRAM_WEBHOOK_SECRET",
    "SUMMARY_SALT",
    "APP_TIMEZONE",
    "CURRENCY_PREFIX",
    "SUMMARY_PAGE_URL",
    "LEDGER_DB",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults_target_singapore() -> None:
    settings = Settings(_env_file=None)

    assert settings.timezone == "Asia/Singapore"
    assert settings.tzinfo.key == "Asia/Singapore"
    assert settings.currency_prefix == "S$"
    assert settings.summary_salt.get_secret_value() == "dev-salt"
    assert settings.ledger_db == Path("var/data/ledger.sqlite")
    assert settings.summary_page_url is None
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("APP_TIMEZONE", "Asia/Kuala_Lumpur")
    monkeypatch.setenv("CURRENCY_PREFIX", "RM")
    monkeypatch.setenv("LEDGER_DB", str(tmp_path / "ledger.sqlite"))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.timezone == "Asia/Kuala_Lumpur"
    assert settings.currency_prefix == "RM"
    assert settings.ledger_db == tmp_path / "ledger.sqlite"
    assert settings.log_level == "DEBUG"


def test_unknown_timezone_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, APP_TIMEZONE="Mars/Olympus_Mons")


def test_blank_summary_url_is_unset() -> None:
    assert Settings(_env_file=None, SUMMARY_PAGE_URL="   ").summary_page_url is None


def test_require_telegram_token() -> None:
    with pytest.raises(ConfigurationError):
        Settings(_env_file=None).require_telegram_token()
    with pytest.raises(ConfigurationError):
        Settings(_env_file=None, TELEGRAM_TOKEN="  ").require_telegram_token()

    assert Settings(_env_file=None, TELEGRAM_TOKEN="123:ABC").require_telegram_token() == "123:ABC"
