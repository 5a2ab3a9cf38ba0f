"""Tests for crptclient.models.document."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from crptclient.core.exceptions import InvalidDocumentError
from crptclient.models.document import (
    Document,
    DocumentFormat,
    DocumentResponse,
    DocumentType,
    SubmissionRequest,
    resolve_format,
    resolve_type,
)


class TestResolveFormat:
    """Caller format to wire format mapping."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("json", DocumentFormat.MANUAL),
            ("csv", DocumentFormat.CSV),
            ("xml", DocumentFormat.XML),
            ("JSON", DocumentFormat.MANUAL),
            (" xml ", DocumentFormat.XML),
            ("MANUAL", DocumentFormat.MANUAL),
        ],
    )
    def test_supported(self, value: str, expected: DocumentFormat) -> None:
        assert resolve_format(value) is expected

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing(self, value: str | None) -> None:
        with pytest.raises(InvalidDocumentError, match="required"):
            resolve_format(value)

    def test_unsupported(self) -> None:
        with pytest.raises(InvalidDocumentError, match="Unsupported document format: pdf"):
            resolve_format("pdf")


class TestResolveType:
    """Document type mapping."""

    def test_supported(self) -> None:
        assert resolve_type("lp_introduce_goods") is DocumentType.LP_INTRODUCE_GOODS

    def test_missing(self) -> None:
        with pytest.raises(InvalidDocumentError, match="type is required"):
            resolve_type(None)

    def test_unsupported(self) -> None:
        with pytest.raises(InvalidDocumentError, match="Unsupported document type"):
            resolve_type("LK_RECEIPT")


class TestSubmissionRequest:
    """Request building and payload."""

    def test_from_document(self) -> None:
        doc = Document(
            product_document="ZG9j",
            product_group="shoes",
            document_format="csv",
            type="LP_INTRODUCE_GOODS",
        )
        request = SubmissionRequest.from_document(doc, "sig")

        assert request.to_payload() == {
            "product_document": "ZG9j",
            "product_group": "shoes",
            "document_format": "CSV",
            "type": "LP_INTRODUCE_GOODS",
            "signature": "sig",
        }

    def test_immutable(self) -> None:
        doc = Document(product_document="ZG9j", document_format="xml", type="LP_INTRODUCE_GOODS")
        request = SubmissionRequest.from_document(doc, "sig")
        with pytest.raises(ValidationError):
            request.signature = "other"

    def test_missing_format(self) -> None:
        doc = Document(product_document="ZG9j", type="LP_INTRODUCE_GOODS")
        with pytest.raises(InvalidDocumentError):
            SubmissionRequest.from_document(doc, "sig")


class TestDocumentResponse:
    """Response body parsing."""

    def test_snake_case(self) -> None:
        body = DocumentResponse.model_validate(
            {"error_code": "E1", "error_message": "bad", "error_description": "why"}
        )
        assert body.value is None
        assert body.error_code == "E1"
        assert body.error_description == "why"

    def test_camel_case_and_extra_keys(self) -> None:
        body = DocumentResponse.model_validate({"value": "doc-1", "errorCode": 3, "trace": "x"})
        assert body.value == "doc-1"
        assert body.error_code == 3
