"""crptclient HTTP utilities.

Provides the rate gate and the document submitters.

Example:
    >>> from crptclient.http import RateGate, DocumentSubmitter
    >>>
    >>> gate = RateGate(limit=5, window=1.0)  # 5 requests/second
    >>> with DocumentSubmitter(token="secret") as submitter:
    ...     gate.admit()
    ...     outcome = submitter.submit(request)
"""

from crptclient.http.client import AsyncDocumentSubmitter, DocumentSubmitter
from crptclient.http.rate_limiter import AsyncRateGate, RateGate

__all__ = [
    "AsyncDocumentSubmitter",
    "AsyncRateGate",
    "DocumentSubmitter",
    "RateGate",
]
