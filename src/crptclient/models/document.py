"""Document models for the document-creation endpoint.

A caller describes a document with :class:`Document`. Before anything is sent,
the document and its signature are turned into a :class:`SubmissionRequest`,
which validates the format and type and produces the JSON wire payload.

Example:
    >>> from crptclient.models.document import Document, SubmissionRequest
    >>> doc = Document(
    ...     product_document="eyJ...",
    ...     product_group="milk",
    ...     document_format="json",
    ...     type="LP_INTRODUCE_GOODS",
    ... )
    >>> request = SubmissionRequest.from_document(doc, signature="c2ln")
    >>> request.document_format
    <DocumentFormat.MANUAL: 'MANUAL'>
    >>> request.to_payload()["document_format"]
    'MANUAL'
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import AliasChoices, ConfigDict, Field

from crptclient.core.exceptions import InvalidDocumentError
from crptclient.models.base import CrptModel


class DocumentFormat(str, Enum):
    """Wire value of ``document_format``."""

    MANUAL = "MANUAL"  # JSON documents
    CSV = "CSV"
    XML = "XML"


class DocumentType(str, Enum):
    """Wire value of ``type``."""

    LP_INTRODUCE_GOODS = "LP_INTRODUCE_GOODS"


# Caller-facing format names mapped to wire values
_FORMAT_ALIASES: dict[str, DocumentFormat] = {
    "json": DocumentFormat.MANUAL,
    "csv": DocumentFormat.CSV,
    "xml": DocumentFormat.XML,
}


class Document(CrptModel):
    """A document to be registered.

    ``document_format`` and ``type`` are optional here so that incomplete
    documents can be described; they are checked when the document is
    turned into a :class:`SubmissionRequest`.

    Example:
        >>> doc = Document(product_document="...", product_group="shoes", document_format="csv")
        >>> doc.type is None
        True
    """

    product_document: str = Field(..., description="Base64-encoded document body")
    product_group: str = Field(default="", description="Product group code")
    document_format: str | None = Field(default=None, description="json, csv or xml")
    type: str | None = Field(default=None, description="Document type")


def resolve_format(value: str | None) -> DocumentFormat:
    """Map a caller-supplied format to its wire value.

    Accepts ``json``/``csv``/``xml`` as well as the wire names themselves,
    case-insensitively.

    Raises:
        InvalidDocumentError: If the format is missing or unsupported

    Example:
        >>> resolve_format("XML")
        <DocumentFormat.XML: 'XML'>
        >>> resolve_format("manual")
        <DocumentFormat.MANUAL: 'MANUAL'>
    """
    if value is None or not value.strip():
        raise InvalidDocumentError("Document format is required")
    key = value.strip().lower()
    if key in _FORMAT_ALIASES:
        return _FORMAT_ALIASES[key]
    try:
        return DocumentFormat(key.upper())
    except ValueError:
        raise InvalidDocumentError(f"Unsupported document format: {value}") from None


def resolve_type(value: str | None) -> DocumentType:
    """Map a caller-supplied document type to its wire value.

    Raises:
        InvalidDocumentError: If the type is missing or unsupported
    """
    if value is None or not value.strip():
        raise InvalidDocumentError("Document type is required")
    try:
        return DocumentType(value.strip().upper())
    except ValueError:
        raise InvalidDocumentError(f"Unsupported document type: {value}") from None


class SubmissionRequest(CrptModel):
    """Validated request body for one document submission."""

    product_document: str
    product_group: str
    document_format: DocumentFormat
    type: DocumentType
    signature: str

    @classmethod
    def from_document(cls, document: Document, signature: str) -> SubmissionRequest:
        """Build a request from a document and its signature.

        Raises:
            InvalidDocumentError: If the format or type is missing or unsupported
        """
        return cls(
            product_document=document.product_document,
            product_group=document.product_group,
            document_format=resolve_format(document.document_format),
            type=resolve_type(document.type),
            signature=signature,
        )

    def to_payload(self) -> dict[str, Any]:
        """JSON body sent to the API."""
        return self.model_dump(mode="json")


class DocumentResponse(CrptModel):
    """Body of a 200 response.

    ``value`` holds the created document id; on failure it is absent and the
    error fields are filled instead. Both snake_case and camelCase keys are
    accepted.

    Example:
        >>> DocumentResponse.model_validate({"value": "doc-1"}).value
        'doc-1'
        >>> DocumentResponse.model_validate({"errorMessage": "bad"}).error_message
        'bad'
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    value: str | None = None
    error_code: str | int | None = Field(
        default=None, validation_alias=AliasChoices("error_code", "errorCode")
    )
    error_message: str | None = Field(
        default=None, validation_alias=AliasChoices("error_message", "errorMessage")
    )
    error_description: str | None = Field(
        default=None, validation_alias=AliasChoices("error_description", "errorDescription")
    )


__all__ = [
    "Document",
    "DocumentFormat",
    "DocumentResponse",
    "DocumentType",
    "SubmissionRequest",
    "resolve_format",
    "resolve_type",
]
