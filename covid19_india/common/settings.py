"""
Application settings loaded from environment variables.
It centralizes process-wide values shared by the API and the storage bootstrap scripts.
Keeping these helpers isolated reduces duplication and keeps domain modules focused on their queries.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

DEFAULT_ENV_VALUES: Final[dict[str, str]] = {
    "PROJECT_NAME": "covid19-india-api",
    "ENV": "local",
    "LOG_LEVEL": "INFO",
    "DATABASE_URL": "sqlite:///covid19India.db",
}

_LOG_LEVELS: Final[frozenset[str]] = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    PROJECT_NAME: str
    ENV: str
    LOG_LEVEL: str
    DATABASE_URL: str

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return normalized

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        if "://" not in value:
            raise ValueError(f"DATABASE_URL must be a SQLAlchemy URL, got {value!r}")
        return value


def load_settings(*, load_env: bool = True) -> Settings:
    """Load and validate environment settings from `.env` and process environment."""

    if load_env:
        load_dotenv()

    values = {key: os.getenv(key) or default for key, default in DEFAULT_ENV_VALUES.items()}
    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor for application settings."""

    return load_settings()
