"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. PASSGATE_ENV_FILE environment variable (path to .env file)
3. config/.env.local - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import logging
import os
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_LOG_LEVELS = {
    "local": "DEBUG",
    "dev": "DEBUG",
    "prod": "INFO",
}


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent
        if (parent / "pyproject.toml").is_file():
            return parent

    return Path.cwd()


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. PASSGATE_ENV_FILE env var (full path or relative to project root)
    2. config/.env.local (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("PASSGATE_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    local_env = config_dir / ".env.local"
    if local_env.exists():
        return local_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.local or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Passgate"
    env: Literal["local", "dev", "prod"] = "local"

    # Database
    database_url: str = "sqlite+aiosqlite:///./storage/passgate.db"

    # Tokens and hashing
    token_ttl: timedelta = timedelta(hours=1)
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # API (API_ prefix)
    api_host: str = "0.0.0.0"
    api_port: int = 44044
    api_debug: bool = False

    # Deadline applied to every auth operation handled by the API
    request_timeout_seconds: float = Field(default=10.0, gt=0)

    # Logging; derived from env when unset
    log_level: str | None = None

    @field_validator("token_ttl")
    @classmethod
    def _validate_token_ttl(cls, v: timedelta) -> timedelta:
        if v <= timedelta(0):
            msg = "token_ttl must be positive"
            raise ValueError(msg)
        return v

    @property
    def resolved_log_level(self) -> int:
        """Numeric log level, from log_level or the environment default."""
        name = (self.log_level or _ENV_LOG_LEVELS[self.env]).upper()
        return getattr(logging, name, logging.INFO)


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
