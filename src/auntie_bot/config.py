"""Typed configuration loader for Auntie Can Count One."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TIMEZONE = "Asia/Singapore"
DEFAULT_CURRENCY_PREFIX = "S$"


class ConfigurationError(RuntimeError):
    """Raised when a setting required by the selected run mode is missing."""


class Settings(BaseSettings):
    """Environment-backed settings using Pydantic's BaseSettings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    telegram_token: SecretStr | None = Field(default=None, alias="TELEGRAM_TOKEN")
    telegram_webhook_secret: str | None = Field(
        default=None, alias="TELEGRAM_WEBHOOK_SECRET"
    )

    summary_salt: SecretStr = Field(
        default=SecretStr("dev-salt"), alias="SUMMARY_SALT"
    )
    timezone: str = Field(default=DEFAULT_TIMEZONE, alias="APP_TIMEZONE")
    currency_prefix: str = Field(
        default=DEFAULT_CURRENCY_PREFIX, alias="CURRENCY_PREFIX"
    )
    summary_page_url: str | None = Field(default=None, alias="SUMMARY_PAGE_URL")

    ledger_db: Path = Field(
        default=Path("var/data/ledger.sqlite"), alias="LEDGER_DB"
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("timezone", mode="after")
    @classmethod
    def _validate_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone {value!r}") from exc
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str | None) -> str:
        return (value or "INFO").upper()

    @field_validator("summary_page_url", mode="after")
    @classmethod
    def _blank_url_is_unset(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    @property
    def tzinfo(self) -> ZoneInfo:
        """Reference timezone used for day, week and month windows."""
        return ZoneInfo(self.timezone)

    def require_telegram_token(self) -> str:
        """Return the bot token or fail loudly for bot run modes."""
        if self.telegram_token is None:
            raise ConfigurationError("TELEGRAM_TOKEN is required to run the bot.")
        token = self.telegram_token.get_secret_value().strip()
        if not token:
            raise ConfigurationError("TELEGRAM_TOKEN is required to run the bot.")
        return token


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()


__all__ = [
    "ConfigurationError",
    "DEFAULT_CURRENCY_PREFIX",
    "DEFAULT_TIMEZONE",
    "Settings",
    "get_settings",
]
