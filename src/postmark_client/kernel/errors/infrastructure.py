"""Infrastructure errors – failures on the send path.

``transient`` marks the failures a retry can plausibly fix; the send pipeline
retries exactly those and surfaces every other ``SendError`` immediately.
"""

from __future__ import annotations

from typing import Any

from postmark_client.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not a message composition problem."""

    default_code = "infrastructure_error"


class SendError(InfrastructureError):
    """A message could not be delivered to the API."""

    default_code = "send_error"
    transient: bool = False


class TransportError(SendError):
    """Connection-level failure (DNS, refused connection, TLS, reset)."""

    default_code = "transport_error"
    transient = True


class SendTimeoutError(SendError):
    """An attempt, or the caller's deadline, ran out of time."""

    default_code = "timeout"
    transient = True

    def __init__(self, message: str = "Request timed out", *, timeout_seconds: float | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.timeout_seconds = timeout_seconds


class RateLimitedError(SendError):
    """HTTP 429; ``retry_after_seconds`` carries the server hint when sent."""

    default_code = "rate_limited"
    transient = True

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        retry_after_seconds: float | None = None,
        **kwargs: Any,
    ) -> None:
        if retry_after_seconds is not None:
            kwargs["detail"] = {**(kwargs.get("detail") or {}), "retry_after_seconds": retry_after_seconds}
        super().__init__(message, **kwargs)
        self.retry_after_seconds = retry_after_seconds


class MalformedResponseError(SendError):
    """The API answered with a body that is not the documented JSON shape."""

    default_code = "malformed_response"


class PayloadError(SendError):
    """A message could not be encoded into a request payload."""

    default_code = "payload_error"


class ApiError(SendError):
    """The API rejected the request.

    ``error_code`` is the API's own ``ErrorCode`` (0 means success and is
    never wrapped in this error); ``status_code`` is the HTTP status.
    """

    default_code = "api_error"

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        detail = {"status_code": status_code, "error_code": error_code, **(kwargs.pop("detail", None) or {})}
        super().__init__(message, detail=detail, **kwargs)
        self.status_code = status_code
        self.error_code = error_code


class AuthenticationError(ApiError):
    """HTTP 401: missing or invalid server token."""

    default_code = "authentication_failed"


class ServerError(ApiError):
    """HTTP 5xx from the API."""

    default_code = "server_error"
    transient = True


__all__ = [
    "ApiError",
    "AuthenticationError",
    "InfrastructureError",
    "MalformedResponseError",
    "PayloadError",
    "RateLimitedError",
    "SendError",
    "SendTimeoutError",
    "ServerError",
    "TransportError",
]
