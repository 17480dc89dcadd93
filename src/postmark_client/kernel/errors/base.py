"""Error roots: ``BaseError`` and the ``ApplicationError`` branch."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of every error raised or returned by the client.

    Args:
        message: Human-readable description, never containing the server token.
        code: Stable machine-readable slug; defaults to the class ``default_code``.
        detail: Extra JSON-friendly context.
        cause: Lower-level exception this error wraps.
    """

    default_code: str = "postmark_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form; ``detail`` and ``cause`` appear only when set."""
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
        }
        if self.detail:
            payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Key/value pairs for a structured log event about this error."""
        return {"error": self.code, "reason": self.message, **self.detail}


class ApplicationError(BaseError):
    """Client setup failed before any message was composed or sent."""

    default_code = "application_error"


__all__ = ["ApplicationError", "BaseError"]
