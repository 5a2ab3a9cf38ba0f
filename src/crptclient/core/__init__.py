"""Core configuration and exceptions."""

from crptclient.core.config import Settings, get_settings
from crptclient.core.exceptions import (
    AdmissionCancelledError,
    ApiError,
    CrptError,
    InvalidConfigurationError,
    InvalidDocumentError,
    TransportError,
)

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "AdmissionCancelledError",
    "ApiError",
    "CrptError",
    "InvalidConfigurationError",
    "InvalidDocumentError",
    "TransportError",
]
