"""Application email – SendReceipt returned for every accepted message."""
from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SendReceipt"]


@dataclass(frozen=True)
class SendReceipt:
    """The API's acknowledgement of one message (``ErrorCode`` 0)."""

    message_id: str
    to: str | None = None
    submitted_at: str | None = None
    error_code: int = 0
    message: str = "OK"
