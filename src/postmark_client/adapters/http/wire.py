"""HTTP adapter – Postmark JSON wire format.

Requests use the API's PascalCase field names; ``To``/``Cc``/``Bcc`` are
comma-separated address lists. Every response object carries ``ErrorCode``
(0 on success), ``Message`` and, when accepted, ``MessageID``.
"""
from __future__ import annotations

import json
import math
from collections.abc import Mapping
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import Any

import httpx

from postmark_client.application.email import Attachment, OutboundEmailBody, SendReceipt
from postmark_client.kernel.errors import (
    ApiError,
    AuthenticationError,
    MalformedResponseError,
    PayloadError,
    RateLimitedError,
    SendError,
    ServerError,
)
from postmark_client.kernel.types import EmailAddress, Err, Ok, Result

SINGLE_PATH = "/email"
BATCH_PATH = "/email/batch"
TOKEN_HEADER = "X-Postmark-Server-Token"


def _join(addresses: tuple[EmailAddress, ...]) -> str:
    return ", ".join(str(a) for a in addresses)


def _attachment(attachment: Attachment) -> dict[str, Any]:
    encoded: dict[str, Any] = {
        "Name": attachment.name,
        "Content": attachment.content,
        "ContentType": attachment.content_type,
    }
    if attachment.content_id is not None:
        encoded["ContentID"] = attachment.content_id
    return encoded


def encode_body(body: OutboundEmailBody, default_sender: EmailAddress) -> dict[str, Any]:
    """Encode one message; raises :class:`PayloadError` for non-body input."""
    if not isinstance(body, OutboundEmailBody):
        raise PayloadError(f"Expected OutboundEmailBody, got {type(body).__name__}")

    payload: dict[str, Any] = {
        "From": str(body.sender or default_sender),
        "To": str(body.to),
        "Subject": body.subject,
        "TrackOpens": body.track_opens,
        "TrackLinks": body.track_links.value,
    }
    if body.cc:
        payload["Cc"] = _join(body.cc)
    if body.bcc:
        payload["Bcc"] = _join(body.bcc)
    if body.reply_to is not None:
        payload["ReplyTo"] = str(body.reply_to)
    if body.html_body is not None:
        payload["HtmlBody"] = body.html_body
    if body.text_body is not None:
        payload["TextBody"] = body.text_body
    if body.tag is not None:
        payload["Tag"] = body.tag
    if body.metadata is not None:
        payload["Metadata"] = dict(body.metadata)
    if body.attachments:
        payload["Attachments"] = [_attachment(a) for a in body.attachments]
    return payload


def parse_retry_after(value: str | None) -> float | None:
    """Interpret a ``Retry-After`` header given in seconds or as an HTTP date."""
    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError:
        pass
    else:
        return max(0.0, seconds) if math.isfinite(seconds) else None
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)
    return max(0.0, (when - datetime.now(UTC)).total_seconds())


def _json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


def _receipt_or_error(item: Any, status_code: int) -> Result[SendReceipt, SendError]:
    if not isinstance(item, Mapping) or "ErrorCode" not in item:
        return Err(MalformedResponseError(f"Unexpected response entry: {item!r}"))
    try:
        error_code = int(item["ErrorCode"])
    except (TypeError, ValueError):
        return Err(MalformedResponseError(f"Non-integer ErrorCode: {item['ErrorCode']!r}"))
    message = str(item.get("Message", ""))
    if error_code != 0:
        return Err(ApiError(message or "Rejected by API", status_code=status_code, error_code=error_code))
    message_id = item.get("MessageID")
    if not message_id:
        return Err(MalformedResponseError("Accepted response is missing MessageID"))
    return Ok(
        SendReceipt(
            message_id=str(message_id),
            to=item.get("To"),
            submitted_at=item.get("SubmittedAt"),
            error_code=error_code,
            message=message,
        )
    )


def error_from_response(response: httpx.Response) -> SendError:
    """Classify a non-2xx response."""
    status = response.status_code
    data = _json(response)
    error_code: int | None = None
    message = response.reason_phrase or f"HTTP {status}"
    if isinstance(data, Mapping):
        message = str(data.get("Message") or message)
        raw_code = data.get("ErrorCode")
        if isinstance(raw_code, int):
            error_code = raw_code

    if status == 401:
        return AuthenticationError(message, status_code=status, error_code=error_code)
    if status == 429:
        return RateLimitedError(
            message,
            retry_after_seconds=parse_retry_after(response.headers.get("Retry-After")),
        )
    if status >= 500:
        return ServerError(message, status_code=status, error_code=error_code)
    return ApiError(message, status_code=status, error_code=error_code)


def decode_single(response: httpx.Response) -> SendReceipt:
    """Decode a single-send response, raising the classified ``SendError``."""
    if not response.is_success:
        raise error_from_response(response)
    data = _json(response)
    if data is None:
        raise MalformedResponseError(f"Response is not JSON (HTTP {response.status_code})")
    return _receipt_or_error(data, response.status_code).unwrap()


def decode_batch(response: httpx.Response, expected: int) -> list[Result[SendReceipt, SendError]]:
    """Decode a batch response into one result per submitted message."""
    if not response.is_success:
        raise error_from_response(response)
    data = _json(response)
    if not isinstance(data, list):
        raise MalformedResponseError(f"Batch response is not a JSON array (HTTP {response.status_code})")
    if len(data) != expected:
        raise MalformedResponseError(f"Batch response has {len(data)} entries, expected {expected}")
    return [_receipt_or_error(item, response.status_code) for item in data]


__all__ = [
    "BATCH_PATH",
    "SINGLE_PATH",
    "TOKEN_HEADER",
    "decode_batch",
    "decode_single",
    "encode_body",
    "error_from_response",
    "parse_retry_after",
]
