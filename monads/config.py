"""
Library configuration using Pydantic Settings.

Settings are read from ``MONADS_``-prefixed environment variables or a
``.env`` file and cached for the lifetime of the process.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class MonadsSettings(BaseSettings):
    """Settings for logging and path lookups."""

    model_config = SettingsConfigDict(
        env_prefix="MONADS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = Field(default="WARNING", description="Minimum log level")
    json_format: bool = Field(default=False, description="Render logs as JSON")
    path_separator: str = Field(
        default=".",
        min_length=1,
        description="Separator between segments in get_in paths",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache
def get_settings() -> MonadsSettings:
    """
    Get cached library settings.

    Returns:
        Configured MonadsSettings instance.
    """
    return MonadsSettings()
