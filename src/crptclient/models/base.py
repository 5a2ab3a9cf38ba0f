"""Base models and shared types.

This module provides the foundational models and enums used throughout crptclient.

Example:
    >>> from crptclient.models.base import TimeUnit
    >>> TimeUnit.MINUTES.seconds
    60.0
    >>> TimeUnit("seconds")
    <TimeUnit.SECONDS: 'seconds'>
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TimeUnit(str, Enum):
    """Length of one rate-limiting window.

    A client configured with ``TimeUnit.MINUTES`` and a limit of 10 may send
    at most 10 requests per minute.

    Example:
        >>> TimeUnit.SECONDS.seconds
        1.0
        >>> TimeUnit.MILLISECONDS.seconds
        0.001
    """

    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    @property
    def seconds(self) -> float:
        """Duration of one unit in seconds."""
        return _UNIT_SECONDS[self]


_UNIT_SECONDS: dict[TimeUnit, float] = {
    TimeUnit.MILLISECONDS: 0.001,
    TimeUnit.SECONDS: 1.0,
    TimeUnit.MINUTES: 60.0,
    TimeUnit.HOURS: 3600.0,
    TimeUnit.DAYS: 86400.0,
}


class CrptModel(BaseModel):
    """Base model with standard configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        frozen=True,
        extra="forbid",
    )
