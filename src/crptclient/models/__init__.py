"""Data models for documents, responses and submission outcomes."""

from crptclient.models.base import CrptModel, TimeUnit
from crptclient.models.document import (
    Document,
    DocumentFormat,
    DocumentResponse,
    DocumentType,
    SubmissionRequest,
)
from crptclient.models.outcome import ApiFailure, SubmissionOutcome, Success, TransportFailure

__all__ = [
    "ApiFailure",
    "CrptModel",
    "Document",
    "DocumentFormat",
    "DocumentResponse",
    "DocumentType",
    "SubmissionOutcome",
    "SubmissionRequest",
    "Success",
    "TimeUnit",
    "TransportFailure",
]
