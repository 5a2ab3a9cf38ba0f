"""HTTP submitters for the document-creation endpoint.

Provides sync and async submitters that POST one validated
:class:`~crptclient.models.document.SubmissionRequest` and turn the response
into a :class:`~crptclient.models.outcome.SubmissionOutcome`. They never
raise for API or network failures; the outcome says what happened.

Example:
    >>> from crptclient.http import DocumentSubmitter
    >>>
    >>> with DocumentSubmitter(token="secret") as submitter:
    ...     outcome = submitter.submit(request)
    ...     if outcome.ok:
    ...         print(outcome.document_id)
"""

from __future__ import annotations

import logging
import threading
from typing import Any

import httpx
from pydantic import ValidationError

from crptclient.core.config import DEFAULT_API_URL
from crptclient.models.document import DocumentResponse, SubmissionRequest
from crptclient.models.outcome import (
    ApiFailure,
    SubmissionOutcome,
    Success,
    TransportFailure,
)

logger = logging.getLogger("crptclient.http")

FAILED_REQUEST_MESSAGE = "Failed to send API request"
FAILED_CREATION_MESSAGE = "Error creating document"


def build_headers(token: str) -> dict[str, str]:
    """Default headers for document requests.

    Example:
        >>> build_headers("abc")["Authorization"]
        'Bearer abc'
    """
    return {
        "content-type": "application/json",
        "Authorization": f"Bearer {token}",
    }


def _parse_body(response: httpx.Response) -> DocumentResponse | None:
    try:
        return DocumentResponse.model_validate(response.json())
    except (ValueError, ValidationError):
        return None


def interpret_response(response: httpx.Response) -> SubmissionOutcome:
    """Turn an HTTP response into a submission outcome.

    Any non-200 status is an :class:`ApiFailure`. A 200 without ``value`` is
    an :class:`ApiFailure` carrying the body's error fields.
    """
    body = _parse_body(response)

    if response.status_code != 200:
        return ApiFailure(
            status_code=response.status_code,
            message=(body and body.error_message) or FAILED_REQUEST_MESSAGE,
            description=body.error_description if body else None,
            error_code=_code(body),
        )

    if body is None:
        return ApiFailure(status_code=200, message="Invalid response body")

    if body.value is not None:
        return Success(document_id=body.value)

    return ApiFailure(
        status_code=200,
        message=body.error_message or FAILED_CREATION_MESSAGE,
        description=body.error_description,
        error_code=_code(body),
    )


def _code(body: DocumentResponse | None) -> str | None:
    if body is None or body.error_code is None:
        return None
    return str(body.error_code)


def _log_outcome(outcome: SubmissionOutcome) -> None:
    if isinstance(outcome, Success):
        logger.debug(f"Document created: {outcome.document_id}")
    elif isinstance(outcome, ApiFailure):
        logger.warning(f"API error {outcome.status_code}: {outcome.message}")
    else:
        logger.warning(f"Transport failure: {outcome.reason}")


class DocumentSubmitter:
    """Blocking submitter backed by ``httpx.Client``.

    Attributes:
        url: Endpoint documents are posted to
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        token: str = "",
        url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ):
        """Initialize submitter.

        Args:
            token: Bearer token for the Authorization header
            url: Document creation endpoint
            timeout: Request timeout in seconds
            client: Existing client to use; it is not closed by the submitter
        """
        self.url = url
        self.timeout = timeout
        self._headers = build_headers(token)
        self._owns_client = client is None
        self._client = client
        self._client_lock = threading.Lock()

    def _ensure_client(self) -> httpx.Client:
        client = self._client
        if client is not None and not client.is_closed:
            return client
        with self._client_lock:
            if self._client is None or self._client.is_closed:
                self._client = httpx.Client(timeout=httpx.Timeout(self.timeout))
                self._owns_client = True
            return self._client

    def submit(self, request: SubmissionRequest) -> SubmissionOutcome:
        """POST one document.

        Args:
            request: Validated request

        Returns:
            Outcome of the exchange
        """
        client = self._ensure_client()
        logger.debug(f"Submitting {request.document_format.value} document to {self.url}")
        outcome: SubmissionOutcome
        try:
            response = client.post(self.url, json=request.to_payload(), headers=self._headers)
        except httpx.TransportError as e:
            outcome = TransportFailure(reason=f"{type(e).__name__}: {e}")
        else:
            outcome = interpret_response(response)
        _log_outcome(outcome)
        return outcome

    def close(self) -> None:
        """Close the HTTP client if this submitter created it."""
        with self._client_lock:
            if self._client is not None and self._owns_client and not self._client.is_closed:
                self._client.close()
            self._client = None

    def __enter__(self) -> DocumentSubmitter:
        self._ensure_client()
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncDocumentSubmitter:
    """Async submitter backed by ``httpx.AsyncClient``."""

    def __init__(
        self,
        token: str = "",
        url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self._headers = build_headers(token)
        self._owns_client = client is None
        self._client = client

    async def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
            self._owns_client = True
        return self._client

    async def submit(self, request: SubmissionRequest) -> SubmissionOutcome:
        """POST one document."""
        client = await self._ensure_client()
        logger.debug(f"Submitting {request.document_format.value} document to {self.url}")
        outcome: SubmissionOutcome
        try:
            response = await client.post(
                self.url, json=request.to_payload(), headers=self._headers
            )
        except httpx.TransportError as e:
            outcome = TransportFailure(reason=f"{type(e).__name__}: {e}")
        else:
            outcome = interpret_response(response)
        _log_outcome(outcome)
        return outcome

    async def close(self) -> None:
        """Close the HTTP client if this submitter created it."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> AsyncDocumentSubmitter:
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


__all__ = [
    "AsyncDocumentSubmitter",
    "DocumentSubmitter",
    "build_headers",
    "interpret_response",
]
