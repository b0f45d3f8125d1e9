"""
Settings using pydantic-settings for type-safe configuration.

Read from FRIENDSHIP_* environment variables or a .env file, loaded once
and cached.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")


class Settings(BaseSettings):
    """Friendship settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FRIENDSHIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: str = Field(
        default="INFO",
        description="Log level: TRACE, DEBUG, INFO, WARNING or ERROR",
    )
    log_source: str = Field(
        default="friendship",
        description="Source identifier shown in log lines",
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log_level."""
        v = v.upper()
        if v not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid FRIENDSHIP_LOG_LEVEL: {v}. Must be one of {', '.join(VALID_LOG_LEVELS)}")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
