"""Failures surfaced by the Grok search core."""

from __future__ import annotations

from enum import Enum


class SearchErrorKind(str, Enum):
    CONFLICTING_FILTER = "conflicting_filter"
    TOO_MANY_HANDLES = "too_many_handles"
    MALFORMED_DATE = "malformed_date"
    DATE_RANGE_INVERTED = "date_range_inverted"
    TRANSPORT_ERROR = "transport_error"
    MALFORMED_PAYLOAD = "malformed_payload"
    PROVIDER_REPORTED = "provider_reported"


class GrokSearchError(RuntimeError):
    """Base class for classified search failures."""

    def __init__(
        self,
        kind: SearchErrorKind,
        message: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.body = body


class SearchRequestError(GrokSearchError):
    """Raised when caller-supplied search options are rejected before any I/O."""


class GrokResponseError(GrokSearchError):
    """Raised when the HTTP exchange or the provider payload fails."""


__all__ = [
    "GrokResponseError",
    "GrokSearchError",
    "SearchErrorKind",
    "SearchRequestError",
]
