"""Exception hierarchy for narwhalol.

All exceptions inherit from :class:`NarwhalError`, which carries an
``exit_code`` attribute mapped to a constant from
:mod:`narwhalol.exit_codes`. The CLI entry point catches ``NarwhalError``
and exits with that code; library callers simply catch the classes they
care about.

Subclass hierarchy::

    NarwhalError (exit 1)
    +-- HTTPStatusError
    |   +-- BadRequestError           400 (exit 2)
    |   +-- UnauthorizedError         401 (exit 3)
    |   +-- ForbiddenError            403 (exit 3)
    |   +-- DataNotFoundError         404 (exit 4)
    |   +-- MethodNotAllowedError     405 (exit 2)
    |   +-- UnsupportedMediaTypeError 415 (exit 2)
    |   +-- RateLimitExceededError    429 (exit 7)
    |   +-- InternalServerError       500 (exit 5)
    |   +-- BadGatewayError           502 (exit 5)
    |   +-- ServiceUnavailableError   503 (exit 5)
    |   +-- GatewayTimeoutError       504 (exit 5)
    +-- TransportError          (exit 6)
    +-- MalformedConfigError    (exit 8)
    +-- DeserializationError    (exit 9)
    +-- ClientClosedError       (exit 1)

Status codes that are not listed above are not errors: :func:`check_status`
lets them through.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from narwhalol.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_BAD_REQUEST,
    EXIT_CONFIG_ERROR,
    EXIT_CONNECTION_ERROR,
    EXIT_DESERIALIZATION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_NOT_FOUND,
    EXIT_RATE_LIMITED,
    EXIT_SERVER_ERROR,
)

if TYPE_CHECKING:
    from narwhalol.constants import Region


class NarwhalError(Exception):
    """Base exception for all narwhalol errors.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


# --- HTTP status errors ---


class HTTPStatusError(NarwhalError):
    """Base class for errors derived from an HTTP status code.

    Subclasses set ``status_code`` and ``reason``; the message is built as
    ``"Got <code>: <reason>"``.
    """

    status_code: int = 0
    reason: str = "Unexpected status"

    def __init__(self, message: str | None = None):
        super().__init__(message or f"Got {self.status_code}: {self.reason}")


class BadRequestError(HTTPStatusError):
    """HTTP 400."""

    status_code = 400
    reason = "Bad Request"
    exit_code = EXIT_BAD_REQUEST


class UnauthorizedError(HTTPStatusError):
    """HTTP 401 -- the API key was missing or not accepted."""

    status_code = 401
    reason = "Unauthorized"
    exit_code = EXIT_AUTH_FAILURE


class ForbiddenError(HTTPStatusError):
    """HTTP 403 -- usually an expired development key."""

    status_code = 403
    reason = "Forbidden"
    exit_code = EXIT_AUTH_FAILURE


class DataNotFoundError(HTTPStatusError):
    """HTTP 404."""

    status_code = 404
    reason = "Data not found"
    exit_code = EXIT_NOT_FOUND


class MethodNotAllowedError(HTTPStatusError):
    """HTTP 405."""

    status_code = 405
    reason = "Method not allowed"
    exit_code = EXIT_BAD_REQUEST


class UnsupportedMediaTypeError(HTTPStatusError):
    """HTTP 415."""

    status_code = 415
    reason = "Unsupported media type"
    exit_code = EXIT_BAD_REQUEST


class RateLimitExceededError(HTTPStatusError):
    """HTTP 429 -- the application or method rate limit was hit.

    Rate limits are not modelled, so ``limit`` is always ``0``.
    """

    status_code = 429
    reason = "Rate limit exceeded"
    exit_code = EXIT_RATE_LIMITED

    def __init__(self, limit: int = 0):
        self.limit = limit
        super().__init__(f"Got 429: Rate limit exceeded. limit: {limit}")


class InternalServerError(HTTPStatusError):
    """HTTP 500."""

    status_code = 500
    reason = "Internal server error"
    exit_code = EXIT_SERVER_ERROR


class BadGatewayError(HTTPStatusError):
    """HTTP 502."""

    status_code = 502
    reason = "Bad Gateway"
    exit_code = EXIT_SERVER_ERROR


class ServiceUnavailableError(HTTPStatusError):
    """HTTP 503 -- the platform for ``region`` is down or in maintenance.

    See https://developer.riotgames.com/api-status/ for live status.
    """

    status_code = 503
    reason = "Service unavailable"
    exit_code = EXIT_SERVER_ERROR

    def __init__(self, region: Optional[Region] = None):
        self.region = region
        label = region.name if region is not None else "unknown"
        super().__init__(f"Got 503: Service unavailable for region {label}")


class GatewayTimeoutError(HTTPStatusError):
    """HTTP 504."""

    status_code = 504
    reason = "Gateway timeout"
    exit_code = EXIT_SERVER_ERROR


# --- Non-status errors ---


class TransportError(NarwhalError):
    """Raised when the request failed before a status code was received.

    Wraps connection, TLS, timeout and protocol failures from :mod:`httpx`;
    the original exception is chained as ``__cause__``.
    """

    exit_code = EXIT_CONNECTION_ERROR


class MalformedConfigError(NarwhalError):
    """Raised at construction time for a missing or malformed API key or setting."""

    exit_code = EXIT_CONFIG_ERROR


class DeserializationError(NarwhalError):
    """Raised when a response body does not match the requested result type.

    Args:
        url: The request URL whose body failed to decode.
        detail: The underlying validation error text.
    """

    exit_code = EXIT_DESERIALIZATION_ERROR

    def __init__(self, url: str, detail: Any):
        self.url = url
        self.detail = detail
        super().__init__(f"Could not deserialize response from {url}: {detail}")


class ClientClosedError(NarwhalError):
    """Raised when a fetcher is used after it has been closed."""


# --- Status mapping ---


_SIMPLE_STATUS_ERRORS: dict[int, type[HTTPStatusError]] = {
    cls.status_code: cls
    for cls in (
        BadRequestError,
        UnauthorizedError,
        ForbiddenError,
        DataNotFoundError,
        MethodNotAllowedError,
        UnsupportedMediaTypeError,
        InternalServerError,
        BadGatewayError,
        GatewayTimeoutError,
    )
}


def status_error(code: int, region: Optional[Region] = None) -> Optional[HTTPStatusError]:
    """Map an HTTP status code to its typed error, without raising.

    Args:
        code: The HTTP status code.
        region: Region reported by :class:`ServiceUnavailableError` on 503.

    Returns:
        The error instance for a listed status, or ``None`` when the code
        is not an error (any status outside the table, including all 2xx).
    """
    if code == 429:
        return RateLimitExceededError(limit=0)
    if code == 503:
        return ServiceUnavailableError(region=region)
    cls = _SIMPLE_STATUS_ERRORS.get(code)
    if cls is None:
        return None
    return cls()


def check_status(code: int, region: Optional[Region] = None) -> None:
    """Raise the typed error for *code*, or return quietly if it is not an error.

    Raises:
        HTTPStatusError: The subclass matching *code*.
    """
    exc = status_error(code, region)
    if exc is not None:
        raise exc
