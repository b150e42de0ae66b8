# This file defines runtime settings for the API layer in one place.
# It exists so the listening address, storage URL, and table names can be configured without code edits.
# The config loader reads environment variables and applies defaults that match a local SQLite file.
# It also validates table names to prevent unsafe SQL identifier usage.

from __future__ import annotations

import os
import re
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

DEFAULT_DATABASE_URL = "sqlite:///covid19India.db"


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "COVID-19 India API"
    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "local"
    database_url: str = DEFAULT_DATABASE_URL
    enable_request_logging: bool = False
    allowed_origins: list[str] = Field(default_factory=list)
    state_table_name: str = "state"
    district_table_name: str = "district"
    app_version: str = "0.1.0"
    allowed_table_names: set[str] = Field(default_factory=set)

    @field_validator("state_table_name", "district_table_name")
    @classmethod
    def validate_identifier(cls, value: str) -> str:
        if not _IDENTIFIER_RE.match(value):
            raise ValueError(f"Unsafe SQL identifier: {value!r}")
        return value

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("port must be between 1 and 65535.")
        return value

    def validate_table_name(self, table_name: str) -> str:
        if not _IDENTIFIER_RE.match(table_name):
            raise ValueError(f"Unsafe SQL identifier: {table_name!r}")
        if table_name not in self.allowed_table_names:
            raise ValueError(f"Table name is not in allowlist: {table_name!r}")
        return table_name


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def _build_allowed_table_names(config_values: dict[str, object]) -> set[str]:
    configured_names = {
        str(config_values["state_table_name"]),
        str(config_values["district_table_name"]),
        "state",
        "district",
    }
    configured_names.update(_env_list("API_ALLOWED_TABLE_NAMES", []))
    for table_name in configured_names:
        if not _IDENTIFIER_RE.match(table_name):
            raise ValueError(f"Unsafe SQL identifier in allowlist: {table_name!r}")
    return configured_names


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "COVID-19 India API"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": _env_int("API_PORT", 3000),
        "environment": os.getenv("ENV", "local"),
        "database_url": os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL,
        "enable_request_logging": _env_bool("API_ENABLE_REQUEST_LOGGING", False),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", []),
        "state_table_name": os.getenv("API_STATE_TABLE_NAME", "state"),
        "district_table_name": os.getenv("API_DISTRICT_TABLE_NAME", "district"),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
    }
    config_values["allowed_table_names"] = _build_allowed_table_names(config_values)

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
