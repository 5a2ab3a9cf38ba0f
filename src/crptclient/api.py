"""Rate-limited client for the document-creation API.

:class:`CrptApi` composes a :class:`~crptclient.http.RateGate` with a
:class:`~crptclient.http.DocumentSubmitter`. Every submission first passes
the gate, so one client instance never sends more than ``request_limit``
requests per time unit, no matter how many threads share it.

Example:
    >>> from crptclient import CrptApi, Document, TimeUnit
    >>>
    >>> with CrptApi(TimeUnit.SECONDS, 5, token="secret") as api:
    ...     doc = Document(
    ...         product_document="eyJ...",
    ...         product_group="milk",
    ...         document_format="json",
    ...         type="LP_INTRODUCE_GOODS",
    ...     )
    ...     document_id = api.create_document(doc, signature="c2ln")
"""

from __future__ import annotations

import threading
from typing import Any

import httpx

from crptclient.core.config import DEFAULT_API_URL, Settings
from crptclient.http.client import AsyncDocumentSubmitter, DocumentSubmitter
from crptclient.http.rate_limiter import AsyncRateGate, RateGate
from crptclient.models.base import TimeUnit
from crptclient.models.document import Document, SubmissionRequest
from crptclient.models.outcome import SubmissionOutcome


class CrptApi:
    """Thread-safe, rate-limited document client.

    Attributes:
        gate: Rate gate shared by every call on this client
        submitter: HTTP boundary
    """

    def __init__(
        self,
        time_unit: TimeUnit | str,
        request_limit: int,
        *,
        token: str = "",
        url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ):
        """Initialize client.

        Args:
            time_unit: Length of one rate-limiting window
            request_limit: Maximum requests per window
            token: Bearer token
            url: Document creation endpoint
            timeout: Request timeout in seconds
            client: Existing ``httpx.Client`` to send requests with

        Raises:
            InvalidConfigurationError: If request_limit is not positive
        """
        self.gate = RateGate.per(time_unit, request_limit)
        self.submitter = DocumentSubmitter(token=token, url=url, timeout=timeout, client=client)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> CrptApi:
        """Create a client from :class:`~crptclient.core.config.Settings`."""
        return cls(
            settings.time_unit,
            settings.request_limit,
            token=settings.token,
            url=settings.api_url,
            timeout=settings.request_timeout,
            **kwargs,
        )

    def submit(
        self,
        document: Document,
        signature: str,
        cancel_event: threading.Event | None = None,
    ) -> SubmissionOutcome:
        """Validate, wait for the gate, and send one document.

        Returns:
            Outcome of the exchange

        Raises:
            InvalidDocumentError: Before the gate or network is touched
            AdmissionCancelledError: If ``cancel_event`` is set while waiting
        """
        request = SubmissionRequest.from_document(document, signature)
        self.gate.admit(cancel_event)
        return self.submitter.submit(request)

    def create_document(
        self,
        document: Document,
        signature: str,
        cancel_event: threading.Event | None = None,
    ) -> str:
        """Create a document and return its id.

        Blocks for as long as the rate gate requires.

        Raises:
            InvalidDocumentError: If the document format or type is missing or unsupported
            AdmissionCancelledError: If ``cancel_event`` is set while waiting
            ApiError: If the API rejects the request
            TransportError: If the request could not be sent
        """
        return self.submit(document, signature, cancel_event).unwrap()

    def close(self) -> None:
        self.submitter.close()

    def __enter__(self) -> CrptApi:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncCrptApi:
    """Rate-limited document client for asyncio.

    Example:
        >>> async with AsyncCrptApi(TimeUnit.MINUTES, 100, token="secret") as api:
        ...     document_id = await api.create_document(doc, signature)
    """

    def __init__(
        self,
        time_unit: TimeUnit | str,
        request_limit: int,
        *,
        token: str = "",
        url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.gate = AsyncRateGate.per(time_unit, request_limit)
        self.submitter = AsyncDocumentSubmitter(
            token=token, url=url, timeout=timeout, client=client
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> AsyncCrptApi:
        return cls(
            settings.time_unit,
            settings.request_limit,
            token=settings.token,
            url=settings.api_url,
            timeout=settings.request_timeout,
            **kwargs,
        )

    async def submit(self, document: Document, signature: str) -> SubmissionOutcome:
        """Validate, wait for the gate, and send one document."""
        request = SubmissionRequest.from_document(document, signature)
        await self.gate.admit()
        return await self.submitter.submit(request)

    async def create_document(self, document: Document, signature: str) -> str:
        """Create a document and return its id.

        Raises:
            InvalidDocumentError: If the document format or type is missing or unsupported
            ApiError: If the API rejects the request
            TransportError: If the request could not be sent
        """
        outcome = await self.submit(document, signature)
        return outcome.unwrap()

    async def close(self) -> None:
        await self.submitter.close()

    async def __aenter__(self) -> AsyncCrptApi:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


__all__ = [
    "AsyncCrptApi",
    "CrptApi",
]
