"""
Utility modules for the Pivotal Tracker client.
"""

from pivotal_client.utils.logging_config import get_logger, setup_file_logging
from pivotal_client.utils.exceptions import (
    PivotalClientError,
    TransportError,
    NetworkTimeoutError,
    PivotalAPIError,
    AuthenticationError,
    NotFoundError,
    RateLimitExceededError,
    DecodeError,
    ValidationError,
    FieldNotSetError,
    CursorError,
)

__all__ = [
    "get_logger",
    "setup_file_logging",
    "PivotalClientError",
    "TransportError",
    "NetworkTimeoutError",
    "PivotalAPIError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitExceededError",
    "DecodeError",
    "ValidationError",
    "FieldNotSetError",
    "CursorError",
]
