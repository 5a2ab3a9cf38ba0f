"""
crptclient - Rate-limited client for the Chestny ZNAK document API.

crptclient submits documents to the document-creation endpoint while keeping
one client instance under a fixed number of requests per time unit, however
many threads or tasks share it.

Quick Start:
    >>> from crptclient import CrptApi, Document, TimeUnit
    >>> with CrptApi(TimeUnit.SECONDS, 5, token="...") as api:
    ...     doc = Document(product_document="...", document_format="json", type="LP_INTRODUCE_GOODS")
    ...     document_id = api.create_document(doc, signature="...")

Architecture:
    Admission control: RateGate, AsyncRateGate
    HTTP boundary: DocumentSubmitter, AsyncDocumentSubmitter
    Clients: CrptApi, AsyncCrptApi
"""

from crptclient.api import AsyncCrptApi, CrptApi
from crptclient.core.config import Settings, get_settings
from crptclient.core.exceptions import (
    AdmissionCancelledError,
    ApiError,
    CrptError,
    InvalidConfigurationError,
    InvalidDocumentError,
    TransportError,
)
from crptclient.http.client import AsyncDocumentSubmitter, DocumentSubmitter
from crptclient.http.rate_limiter import AsyncRateGate, RateGate
from crptclient.models.base import TimeUnit
from crptclient.models.document import (
    Document,
    DocumentFormat,
    DocumentResponse,
    DocumentType,
    SubmissionRequest,
)
from crptclient.models.outcome import ApiFailure, SubmissionOutcome, Success, TransportFailure

__version__ = "0.1.0"

__all__ = [
    # Clients
    "AsyncCrptApi",
    "CrptApi",
    # Rate limiting
    "AsyncRateGate",
    "RateGate",
    "TimeUnit",
    # HTTP
    "AsyncDocumentSubmitter",
    "DocumentSubmitter",
    # Models
    "Document",
    "DocumentFormat",
    "DocumentResponse",
    "DocumentType",
    "SubmissionRequest",
    # Outcomes
    "ApiFailure",
    "SubmissionOutcome",
    "Success",
    "TransportFailure",
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
    "__version__",
]
