"""crptclient configuration.

Application settings loaded from environment variables with CRPT_ prefix.

Example:
    >>> from crptclient.core.config import get_settings
    >>> settings = get_settings(request_limit=5)
    >>> settings.request_limit
    5
    >>> settings.time_unit
    <TimeUnit.SECONDS: 'seconds'>
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from crptclient.models.base import TimeUnit

DEFAULT_API_URL = "https://ismp.crpt.ru/api/v3/lk/documents/create"


class Settings(BaseSettings):
    """Application settings.

    Loads from environment variables with CRPT_ prefix.

    Example:
        >>> from crptclient.core.config import Settings
        >>> s = Settings(token="secret", time_unit="minutes")
        >>> s.time_unit.seconds
        60.0
        >>> s.api_url
        'https://ismp.crpt.ru/api/v3/lk/documents/create'
    """

    model_config = SettingsConfigDict(
        env_prefix="CRPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_url: str = Field(default=DEFAULT_API_URL, description="Document creation endpoint")
    token: str = Field(default="", description="Bearer token sent in Authorization header")
    request_timeout: float = Field(default=30.0, gt=0.0)

    # Rate limiting
    request_limit: int = Field(default=10, ge=1, description="Requests allowed per time unit")
    time_unit: TimeUnit = Field(default=TimeUnit.SECONDS, description="Length of one window")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from crptclient.core.config import get_settings
        >>> s = get_settings(request_timeout=5.0)
        >>> s.request_timeout
        5.0
    """
    return Settings(**overrides)
