# This file defines runtime settings for the marketplace API in one place.
# Values come from `.env` and the process environment, with local-development defaults.
# The listening port follows the plain `PORT` variable; everything else is optional.

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PORT = 3000
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024
DEFAULT_MAX_IMAGES_PER_UPLOAD = 5


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Unity Mall eSME API"
    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    environment: str = "local"
    log_level: str = "INFO"
    database_url: str = "sqlite:///./unity_mall.db"
    upload_dir: str = "uploads"
    upload_url_prefix: str = "/uploads"
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    max_images_per_upload: int = DEFAULT_MAX_IMAGES_PER_UPLOAD
    static_dir: str | None = "public"
    allowed_origins: list[str] = Field(default_factory=lambda: ["*"])
    app_version: str = "1.0.0"

    @field_validator("api_prefix", "upload_url_prefix")
    @classmethod
    def validate_path_prefix(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("path prefixes must start with '/'.")
        return value.rstrip("/")

    @field_validator("max_upload_bytes", "max_images_per_upload")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 1 <= value <= 65535:
            raise ValueError(f"port must be between 1 and 65535, got {value}")
        return value


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


def _env_optional(name: str, default: str | None) -> str | None:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip() or None


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "Unity Mall eSME API"),
        "api_prefix": os.getenv("API_PREFIX", "/api"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": _env_int("PORT", DEFAULT_PORT),
        "environment": os.getenv("ENV", "local"),
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
        "database_url": os.getenv("DATABASE_URL", "sqlite:///./unity_mall.db"),
        "upload_dir": os.getenv("UPLOAD_DIR", "uploads"),
        "upload_url_prefix": os.getenv("UPLOAD_URL_PREFIX", "/uploads"),
        "max_upload_bytes": _env_int("MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES),
        "max_images_per_upload": _env_int("MAX_IMAGES_PER_UPLOAD", DEFAULT_MAX_IMAGES_PER_UPLOAD),
        "static_dir": _env_optional("STATIC_DIR", "public"),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", ["*"]),
        "app_version": os.getenv("APP_VERSION", "1.0.0"),
    }
    if not str(config_values["database_url"]).strip():
        raise RuntimeError("DATABASE_URL cannot be empty.")

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
