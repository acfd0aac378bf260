import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _resolve_env_file() -> str:
    local_override = _PROJECT_ROOT / ".env.local"
    if local_override.exists():
        return str(local_override)
    override = os.environ.get("LRU_SERVICE_ENV_FILE")
    if override:
        return override
    env_name = os.environ.get("ENV", "development").lower()
    candidate = _PROJECT_ROOT / f".env.{env_name}"
    if env_name not in {"", "development"} and candidate.exists():
        return str(candidate)
    return str(_PROJECT_ROOT / ".env")


class Settings(BaseSettings):
    """Central configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    env: str = Field("development", alias="ENV")
    cache_capacity: int = Field(256, ge=1, alias="CACHE_CAPACITY")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    app_base_url: str = Field("http://localhost:8000", alias="APP_BASE_URL")
    cors_allow_origins: Optional[str] = Field(None, alias="CORS_ALLOW_ORIGINS")

    @field_validator("app_base_url")
    @classmethod
    def ensure_no_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def ensure_known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def debug(self) -> bool:
        return self.env.lower() in {"development", "test"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
