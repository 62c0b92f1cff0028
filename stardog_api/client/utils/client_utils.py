"""
Stardog Client Utilities

Shared exception hierarchy and helper functions for Stardog client endpoints.
"""

from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class ErrorKind(str, Enum):
    """Coarse classification of client failures for callers that match on kind."""
    CONFIGURATION = "configuration"
    CONTEXT = "context"
    HTTP = "http"
    DECODE = "decode"


class StardogClientError(Exception):
    """Base exception for Stardog client errors."""
    kind: Optional[ErrorKind] = None


class StardogConfigurationError(StardogClientError):
    """Raised for client misconfiguration caught before any network I/O."""
    kind = ErrorKind.CONFIGURATION


class ContextRequiredError(StardogClientError):
    """Raised when a request is dispatched without a request context."""
    kind = ErrorKind.CONTEXT

    def __init__(self, message: str = "context must not be None"):
        super().__init__(message)


class RequestCancelledError(StardogClientError):
    """Raised when the request context was cancelled."""
    kind = ErrorKind.CONTEXT

    def __init__(self, message: str = "request context cancelled"):
        super().__init__(message)


class DeadlineExceededError(StardogClientError):
    """Raised when the request context deadline passed."""
    kind = ErrorKind.CONTEXT

    def __init__(self, message: str = "request context deadline exceeded"):
        super().__init__(message)


class StardogAPIError(StardogClientError):
    """
    An error reported by the Stardog server for a non-2xx response.

    The server encodes errors as ``{"message": "...", "code": "..."}``. When the
    body does not have that shape the raw body text (or the reason phrase) is
    kept as the message and ``code`` is None.

    Two errors compare equal when message, code and HTTP status match; the
    triggering response object itself is not compared.
    """
    kind = ErrorKind.HTTP

    def __init__(self, status_code: int, message: str = "", code: Optional[str] = None,
                 response: Optional["httpx.Response"] = None):
        self.status_code = status_code
        self.message = message
        self.code = code
        self.response = response
        super().__init__(str(self))

    def __str__(self) -> str:
        method = "?"
        reason = ""
        if self.response is not None:
            reason = self.response.reason_phrase
            try:
                method = self.response.request.method
            except RuntimeError:
                pass
        return f"[{method}] [{self.status_code} {reason}] | [{self.message}] [{self.code}]"

    def __eq__(self, other) -> bool:
        if not isinstance(other, StardogAPIError):
            return NotImplemented
        return (self.message, self.code, self.status_code) == (other.message, other.code, other.status_code)

    def __hash__(self) -> int:
        return hash((self.message, self.code, self.status_code))


class StardogDecodeError(StardogClientError):
    """Raised when a successful response body cannot be decoded into the requested type."""
    kind = ErrorKind.DECODE

    def __init__(self, message: str, response: Optional["httpx.Response"] = None):
        super().__init__(message)
        self.response = response


def validate_required_params(**params):
    """
    Validate that required parameters are provided.

    Args:
        **params: Parameter name-value pairs to validate

    Raises:
        StardogConfigurationError: If any required parameter is missing or empty
    """
    for param_name, param_value in params.items():
        if param_value is None or param_value == "":
            raise StardogConfigurationError(f"Required parameter '{param_name}' is missing or empty")


def parse_bool_response(error: Optional[BaseException]) -> bool:
    """
    Turn the outcome of a status-only call into a boolean.

    Some Stardog endpoints answer purely through the HTTP status. A call that
    completed without error is True, a 404 is a legitimate False, and every
    other error is re-raised unchanged.

    Args:
        error: The exception raised by the call, or None if it succeeded

    Returns:
        True on success, False for a 404 StardogAPIError
    """
    if error is None:
        return True
    if isinstance(error, StardogAPIError) and error.status_code == 404:
        return False
    raise error
