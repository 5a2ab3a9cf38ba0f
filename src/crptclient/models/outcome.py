"""Submission outcomes.

The submitter never raises for API or network failures; it returns one of
:class:`Success`, :class:`ApiFailure` or :class:`TransportFailure`. Callers
that prefer exceptions call :meth:`unwrap`.

Example:
    >>> from crptclient.models.outcome import ApiFailure, Success
    >>> Success(document_id="doc-1").unwrap()
    'doc-1'
    >>> ApiFailure(status_code=500, message="boom").ok
    False
"""

from __future__ import annotations

from typing import Literal, Union

from crptclient.core.exceptions import ApiError, TransportError
from crptclient.models.base import CrptModel


class Success(CrptModel):
    """The document was created."""

    kind: Literal["success"] = "success"
    document_id: str

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> str:
        """Return the created document id."""
        return self.document_id


class ApiFailure(CrptModel):
    """The API answered with a non-200 status or an error body."""

    kind: Literal["api_error"] = "api_error"
    status_code: int
    message: str
    description: str | None = None
    error_code: str | None = None

    @property
    def ok(self) -> bool:
        return False

    def to_exception(self) -> ApiError:
        return ApiError(self.status_code, self.message, self.description, self.error_code)

    def unwrap(self) -> str:
        """Raise :class:`ApiError`."""
        raise self.to_exception()


class TransportFailure(CrptModel):
    """The request never produced an HTTP response."""

    kind: Literal["transport_error"] = "transport_error"
    reason: str

    @property
    def ok(self) -> bool:
        return False

    def to_exception(self) -> TransportError:
        return TransportError(self.reason)

    def unwrap(self) -> str:
        """Raise :class:`TransportError`."""
        raise self.to_exception()


SubmissionOutcome = Union[Success, ApiFailure, TransportFailure]


__all__ = [
    "ApiFailure",
    "SubmissionOutcome",
    "Success",
    "TransportFailure",
]
