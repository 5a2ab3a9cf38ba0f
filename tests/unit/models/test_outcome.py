"""Tests for crptclient.models.outcome."""

from __future__ import annotations

import pytest

from crptclient.core.exceptions import ApiError, TransportError
from crptclient.models.outcome import ApiFailure, Success, TransportFailure


def test_success_unwrap() -> None:
    outcome = Success(document_id="doc-1")
    assert outcome.ok is True
    assert outcome.unwrap() == "doc-1"


def test_api_failure_unwrap_raises() -> None:
    outcome = ApiFailure(status_code=500, message="Failed", description="down", error_code="E5")
    assert outcome.ok is False
    with pytest.raises(ApiError) as exc_info:
        outcome.unwrap()
    err = exc_info.value
    assert (err.status_code, err.message, err.description, err.error_code) == (500, "Failed", "down", "E5")
    assert "500" in str(err)


def test_transport_failure_unwrap_raises() -> None:
    outcome = TransportFailure(reason="ConnectError: refused")
    assert outcome.ok is False
    with pytest.raises(TransportError, match="refused"):
        outcome.unwrap()
