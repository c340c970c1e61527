"""
Custom exceptions for the Pivotal Tracker client.
"""

from typing import Optional


class PivotalClientError(Exception):
    """Base exception for Pivotal Tracker client errors."""
    pass


class TransportError(PivotalClientError):
    """Request could not be completed (network failure or non-2xx response)."""

    def __init__(self, message: str, endpoint: Optional[str] = None):
        self.endpoint = endpoint
        super().__init__(message)


class NetworkTimeoutError(TransportError):
    """Network request timed out."""

    def __init__(self, endpoint: Optional[str] = None, timeout: Optional[float] = None):
        self.timeout = timeout
        message = f"Request timed out after {timeout}s" if timeout else "Request timed out"
        super().__init__(message, endpoint=endpoint)


class PivotalAPIError(TransportError):
    """Error from Pivotal Tracker API response."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        endpoint: Optional[str] = None,
        response_body: Optional[str] = None,
        code: Optional[str] = None,
        error: Optional[str] = None,
    ):
        self.status_code = status_code
        self.response_body = response_body
        self.code = code
        self.error = error
        super().__init__(message, endpoint=endpoint)


class AuthenticationError(PivotalAPIError):
    """Authentication failed (HTTP 401/403)."""


class NotFoundError(PivotalAPIError):
    """Resource not found (HTTP 404)."""


class RateLimitExceededError(PivotalAPIError):
    """Rate limit exceeded (HTTP 429)."""


class DecodeError(PivotalClientError):
    """Response body could not be decoded into the expected record."""

    def __init__(self, message: str, endpoint: Optional[str] = None):
        self.endpoint = endpoint
        super().__init__(message)


class ValidationError(PivotalClientError):
    """Request rejected locally before anything was sent."""
    pass


class FieldNotSetError(ValidationError):
    """A required request field is missing."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field not set: {field}")


class CursorError(PivotalClientError):
    """Cursor was constructed or used incorrectly."""
    pass
