"""Typed exception hierarchy for content API errors.

This module defines all custom exceptions used by the content client library.
All exceptions inherit from ContentClientError base class for easy catching and
carry machine-readable fields (code, status) so callers can branch on them
without parsing messages.
"""

from typing import Optional


# Error codes that never carry an HTTP status
TIMEOUT = "TIMEOUT"
MAX_RETRIES_EXCEEDED = "MAX_RETRIES_EXCEEDED"
INVALID_RESPONSE = "INVALID_RESPONSE"


class ContentClientError(Exception):
    """Base exception for all content client errors.

    Use this to catch any application-level error from the library.
    """
    pass


class ClientError(ContentClientError):
    """Raised when a request to the content API fails.

    Attributes:
        message: Human-readable description of the failure
        status: HTTP status code, only set when a response was received
        code: One of ``HTTP_<status>``, ``TIMEOUT`` or ``MAX_RETRIES_EXCEEDED``
    """

    def __init__(self, message: str, status: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code

    @classmethod
    def from_status(cls, status: int, reason: str = "", body: str = "") -> "ClientError":
        """Build the error for a non-2xx HTTP response."""
        message = f"HTTP {status}: {reason}"
        if body:
            message += f" - {body}"
        return cls(message, status=status, code=f"HTTP_{status}")

    @classmethod
    def timeout(cls) -> "ClientError":
        return cls("Request timeout", code=TIMEOUT)

    @classmethod
    def max_retries_exceeded(cls, attempts: int, last_message: str) -> "ClientError":
        return cls(
            f"Failed after {attempts} attempts: {last_message}",
            code=MAX_RETRIES_EXCEEDED,
        )

    @property
    def is_client_side(self) -> bool:
        """True for 4xx responses, where retrying won't help."""
        return self.status is not None and self.status < 500

    def __repr__(self) -> str:
        return f"ClientError(message={self.message!r}, status={self.status!r}, code={self.code!r})"


class ResponseValidationError(ContentClientError):
    """Raised when a successful response body is not JSON or has the wrong shape."""

    code = INVALID_RESPONSE

    def __init__(self, message: str, field: Optional[str] = None):
        if field:
            full_message = f"Invalid response field '{field}': {message}"
        else:
            full_message = f"Invalid response: {message}"
        super().__init__(full_message)
        self.field = field
        self.original_message = message


class ConfigError(ContentClientError):
    """Raised when client configuration validation fails."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message
