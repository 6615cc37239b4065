# core/errors.py
"""
Error taxonomy shared by the core services and the HTTP layer.

    ValidationError -> 400, message is shown to the caller
    ProviderError   -> upstream weather failure (transport, status, logical)
    InternalError   -> 500, generic message only
"""
from typing import Any, Optional


class AdvisoryError(Exception):
    """Base class for every error raised on purpose by soilsense."""

    public_message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message


class ValidationError(AdvisoryError):
    """Missing or malformed caller input."""

    public_message = "Invalid request"


class ProviderError(AdvisoryError):
    """The weather provider could not produce a usable snapshot.

    kind is one of "Transport", "UpstreamStatus", "LogicalFailure" or
    "Configuration". For "UpstreamStatus" the upstream status code and body
    are kept so the caller can see what the provider said.
    """

    public_message = "Weather API error"

    TRANSPORT = "Transport"
    UPSTREAM_STATUS = "UpstreamStatus"
    LOGICAL_FAILURE = "LogicalFailure"
    CONFIGURATION = "Configuration"

    def __init__(
        self,
        kind: str,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.details = details

    def __repr__(self) -> str:
        return f"ProviderError(kind={self.kind!r}, status_code={self.status_code!r})"


class InternalError(AdvisoryError):
    """Unexpected failure; full detail goes to the log, never to the caller."""


class DuplicateRecordError(AdvisoryError):
    """A document store already holds a record with the same key."""

    public_message = "Duplicate record"
