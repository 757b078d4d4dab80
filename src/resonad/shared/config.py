"""Library configuration.

Uses pydantic-settings for environment variable support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings with environment variable support.

    All settings can be overridden via environment variables prefixed
    with RESONAD_.
    Example: RESONAD_LOG_LEVEL, RESONAD_LOG_RESCUES
    """

    model_config = SettingsConfigDict(
        env_prefix="RESONAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level for the resonad logger",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional log file path",
    )

    # =========================================================================
    # Rescue
    # =========================================================================
    log_rescues: bool = Field(
        default=True,
        description="Log exceptions rescued or re-raised by rescuing_from",
    )

    # =========================================================================
    # Validators
    # =========================================================================
    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept lower-case level names."""
        if isinstance(v, str):
            return v.upper()
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

