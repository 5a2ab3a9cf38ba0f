"""Tests for crptclient.core.config and crptclient.core.exceptions."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from crptclient.core.config import DEFAULT_API_URL, Settings, get_settings
from crptclient.core.exceptions import (
    AdmissionCancelledError,
    ApiError,
    CrptError,
    InvalidConfigurationError,
    InvalidDocumentError,
    TransportError,
)
from crptclient.models.base import TimeUnit


class TestSettings:
    """Settings loading."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("CRPT_API_URL", "CRPT_REQUEST_LIMIT", "CRPT_TIME_UNIT"):
            monkeypatch.delenv(name, raising=False)
        s = Settings(_env_file=None)
        assert s.api_url == DEFAULT_API_URL
        assert s.request_limit == 10
        assert s.time_unit is TimeUnit.SECONDS

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CRPT_TOKEN", "from-env")
        monkeypatch.setenv("CRPT_REQUEST_LIMIT", "42")
        monkeypatch.setenv("CRPT_TIME_UNIT", "minutes")
        s = get_settings()
        assert s.token == "from-env"
        assert s.request_limit == 42
        assert s.time_unit is TimeUnit.MINUTES

    def test_overrides(self) -> None:
        assert get_settings(request_timeout=2.5).request_timeout == 2.5

    def test_log_level_normalized(self) -> None:
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_limit_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(request_limit=0)


class TestExceptions:
    """Exception hierarchy."""

    @pytest.mark.parametrize(
        "exc",
        [
            InvalidConfigurationError("x"),
            InvalidDocumentError("x"),
            AdmissionCancelledError("x"),
            ApiError(500, "x"),
            TransportError("x"),
        ],
    )
    def test_all_derive_from_base(self, exc: Exception) -> None:
        assert isinstance(exc, CrptError)

    def test_api_error_message(self) -> None:
        err = ApiError(404, "Not found", description="no such endpoint")
        assert str(err) == (
            "API request failed with status code: 404, Error message: Not found (no such endpoint)"
        )

    def test_time_unit_seconds(self) -> None:
        assert TimeUnit.DAYS.seconds == 86400.0
