"""
Configuration Management

Loads application settings from environment variables (optionally
populated from a .env file) and validates them before any stage runs.
"""

import os
from dataclasses import dataclass
from typing import Optional

from utils.exceptions import ConfigError

DEFAULT_POOL_USAGE_URL = "https://www.lazdynubaseinas.eu/"
DEFAULT_TELEGRAM_API_BASE = "https://api.telegram.org"
DEFAULT_REQUEST_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    database_url: str
    pool_usage_url: str = DEFAULT_POOL_USAGE_URL
    telegram_bot_token: Optional[str] = None
    telegram_chat_id: Optional[str] = None
    telegram_api_base: str = DEFAULT_TELEGRAM_API_BASE
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @property
    def telegram_configured(self):
        return bool(self.telegram_bot_token and self.telegram_chat_id)


def _read_env(name, default=None):
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_timeout(default):
    value = _read_env("REQUEST_TIMEOUT")
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError:
        raise ConfigError(f"REQUEST_TIMEOUT must be a number, got {value!r}")
    if parsed <= 0:
        raise ConfigError(f"REQUEST_TIMEOUT must be positive, got {value!r}")
    return parsed


def normalize_database_url(url):
    """
    Rewrite Heroku-style postgres:// URLs to the postgresql:// scheme
    SQLAlchemy expects.
    """
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


def load_settings(require_telegram=True):
    """
    Build Settings from the environment.

    Args:
        require_telegram (bool): Fail when the Telegram credentials are absent.

    Returns:
        Settings: Validated settings

    Raises:
        ConfigError: If a required variable is missing or invalid
    """
    database_url = _read_env("DATABASE_URL")
    bot_token = _read_env("TELEGRAM_BOT_TOKEN")
    chat_id = _read_env("TELEGRAM_CHAT_ID")

    missing = []
    if not database_url:
        missing.append("DATABASE_URL")
    if require_telegram:
        if not bot_token:
            missing.append("TELEGRAM_BOT_TOKEN")
        if not chat_id:
            missing.append("TELEGRAM_CHAT_ID")
    if missing:
        raise ConfigError(
            f"{', '.join(missing)} environment variable(s) must be set"
        )

    return Settings(
        database_url=normalize_database_url(database_url),
        pool_usage_url=_read_env("POOL_USAGE_URL", DEFAULT_POOL_USAGE_URL),
        telegram_bot_token=bot_token,
        telegram_chat_id=chat_id,
        telegram_api_base=_read_env("TELEGRAM_API_BASE", DEFAULT_TELEGRAM_API_BASE).rstrip("/"),
        request_timeout=_read_timeout(DEFAULT_REQUEST_TIMEOUT),
    )
