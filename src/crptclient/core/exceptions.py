"""Custom exceptions.

crptclient uses a hierarchy of exceptions to provide clear error handling:

Example:
    >>> from crptclient.core.exceptions import ApiError, CrptError
    >>> isinstance(ApiError(500, "boom"), CrptError)
    True
    >>> try:
    ...     raise ApiError(404, "not found")
    ... except CrptError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: ApiError
"""

from __future__ import annotations


class CrptError(Exception):
    """Base exception for crptclient.

    Example:
        >>> from crptclient.core.exceptions import CrptError
        >>> e = CrptError("something went wrong")
        >>> str(e)
        'something went wrong'
    """


class InvalidConfigurationError(CrptError, ValueError):
    """Client or gate configuration is invalid.

    Example:
        >>> from crptclient.core.exceptions import InvalidConfigurationError
        >>> raise InvalidConfigurationError("limit must be positive")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        InvalidConfigurationError: limit must be positive
    """


class InvalidDocumentError(CrptError, ValueError):
    """Document is missing a required field or uses an unsupported value.

    Example:
        >>> from crptclient.core.exceptions import InvalidDocumentError
        >>> raise InvalidDocumentError("Document format is required")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        InvalidDocumentError: Document format is required
    """


class AdmissionCancelledError(CrptError):
    """A caller waiting on the rate gate was cancelled before admission."""


class ApiError(CrptError):
    """The remote API rejected the request.

    Attributes:
        status_code: HTTP status of the response
        message: Short error message
        description: Optional longer description from the response body
        error_code: Optional error code from the response body
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        description: str | None = None,
        error_code: str | None = None,
    ):
        self.status_code = status_code
        self.message = message
        self.description = description
        self.error_code = error_code
        text = f"API request failed with status code: {status_code}, Error message: {message}"
        if description:
            text += f" ({description})"
        super().__init__(text)


class TransportError(CrptError):
    """Network or connection failure while talking to the API."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Transport failure: {reason}")


__all__ = [
    "AdmissionCancelledError",
    "ApiError",
    "CrptError",
    "InvalidConfigurationError",
    "InvalidDocumentError",
    "TransportError",
]
