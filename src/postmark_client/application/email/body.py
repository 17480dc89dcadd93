"""Application email – OutboundEmailBody and its builder.

The recipient is bound when the builder is created, so no body can exist
without one. Every setter validates its own argument; ``build()`` checks the
rules that span fields (a body is present, attachment count and total size).
"""
from __future__ import annotations

import enum
import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from postmark_client.application.email.attachment import MAX_ATTACHMENT_BYTES, Attachment
from postmark_client.kernel.errors import (
    InvariantViolationError,
    MessageTooLargeError,
    MissingBodyError,
    TooManyAttachmentsError,
    TooManyRecipientsError,
    ValidationError,
)
from postmark_client.kernel.types import EmailAddress, Err, Ok, Result

__all__ = [
    "DEFAULT_MAX_ATTACHMENTS",
    "MAX_MESSAGE_BYTES",
    "MAX_RECIPIENTS",
    "MAX_TAG_LENGTH",
    "OutboundEmailBody",
    "OutboundEmailBodyBuilder",
    "TrackLinks",
]

MAX_RECIPIENTS = 50
MAX_TAG_LENGTH = 1000
MAX_MESSAGE_BYTES = MAX_ATTACHMENT_BYTES
DEFAULT_MAX_ATTACHMENTS = 50


class TrackLinks(enum.Enum):
    """Link-click tracking mode; the value is the wire spelling."""

    NONE = "None"
    HTML_AND_TEXT = "HtmlAndText"
    HTML_ONLY = "HtmlOnly"
    TEXT_ONLY = "TextOnly"


@dataclass(frozen=True)
class OutboundEmailBody:
    """A validated, immutable message ready for the send pipeline.

    Instances normally come from :meth:`OutboundEmailBody.builder`. Direct
    construction enforces the same body, recipient and total-size rules; the
    attachment count is a per-builder setting and is checked only by
    ``build()``. ``sender`` is ``None`` when the client's default sender
    applies.
    """

    to: EmailAddress
    subject: str = ""
    html_body: str | None = None
    text_body: str | None = None
    cc: tuple[EmailAddress, ...] = ()
    bcc: tuple[EmailAddress, ...] = ()
    reply_to: EmailAddress | None = None
    tag: str | None = None
    metadata: Mapping[str, Any] | None = None
    track_opens: bool = False
    track_links: TrackLinks = TrackLinks.NONE
    attachments: tuple[Attachment, ...] = field(default_factory=tuple)
    sender: EmailAddress | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.to, EmailAddress):
            raise ValidationError("to must be an EmailAddress", errors=[{"field": "to"}])
        if not self.html_body and not self.text_body:
            raise MissingBodyError()
        for name, addresses in (("cc", self.cc), ("bcc", self.bcc)):
            if len(addresses) > MAX_RECIPIENTS:
                raise TooManyRecipientsError(name, len(addresses), MAX_RECIPIENTS)
        total = sum(a.size for a in self.attachments)
        if total > MAX_MESSAGE_BYTES:
            raise MessageTooLargeError(total, MAX_MESSAGE_BYTES)

    @staticmethod
    def builder(to: EmailAddress | str, *, max_attachments: int = DEFAULT_MAX_ATTACHMENTS) -> OutboundEmailBodyBuilder:
        return OutboundEmailBodyBuilder(to, max_attachments=max_attachments)

    def all_recipients(self) -> list[EmailAddress]:
        """Return combined to + cc + bcc recipient list."""
        return [self.to, *self.cc, *self.bcc]


def _addresses(field_name: str, values: Iterable[EmailAddress | str]) -> tuple[EmailAddress, ...]:
    if isinstance(values, (str, EmailAddress)):
        values = [values]
    unique = tuple(dict.fromkeys(EmailAddress.coerce(v) for v in values))
    if len(unique) > MAX_RECIPIENTS:
        raise TooManyRecipientsError(field_name, len(unique), MAX_RECIPIENTS)
    return unique


class OutboundEmailBodyBuilder:
    """Fluent builder for :class:`OutboundEmailBody`; good for a single ``build()``."""

    def __init__(self, to: EmailAddress | str, *, max_attachments: int = DEFAULT_MAX_ATTACHMENTS) -> None:
        self._to = EmailAddress.coerce(to)
        self._max_attachments = max_attachments
        self._subject = ""
        self._html_body: str | None = None
        self._text_body: str | None = None
        self._cc: tuple[EmailAddress, ...] = ()
        self._bcc: tuple[EmailAddress, ...] = ()
        self._reply_to: EmailAddress | None = None
        self._tag: str | None = None
        self._metadata: Mapping[str, Any] | None = None
        self._track_opens = False
        self._track_links = TrackLinks.NONE
        self._attachments: list[Attachment] = []
        self._sender: EmailAddress | None = None
        self._built = False

    def _ensure_open(self) -> None:
        if self._built:
            raise InvariantViolationError("OutboundEmailBodyBuilder has already been built")

    def subject(self, subject: str) -> OutboundEmailBodyBuilder:
        self._ensure_open()
        if not isinstance(subject, str):
            raise ValidationError("subject must be a string", errors=[{"field": "subject"}])
        self._subject = subject
        return self

    def html_body(self, html_body: str) -> OutboundEmailBodyBuilder:
        self._ensure_open()
        if not isinstance(html_body, str):
            raise ValidationError("html_body must be a string", errors=[{"field": "html_body"}])
        self._html_body = html_body
        return self

    def text_body(self, text_body: str) -> OutboundEmailBodyBuilder:
        self._ensure_open()
        if not isinstance(text_body, str):
            raise ValidationError("text_body must be a string", errors=[{"field": "text_body"}])
        self._text_body = text_body
        return self

    def cc(self, addresses: Iterable[EmailAddress | str]) -> OutboundEmailBodyBuilder:
        self._ensure_open()
        self._cc = _addresses("cc", addresses)
        return self

    def bcc(self, addresses: Iterable[EmailAddress | str]) -> OutboundEmailBodyBuilder:
        self._ensure_open()
        self._bcc = _addresses("bcc", addresses)
        return self

    def reply_to(self, address: EmailAddress | str) -> OutboundEmailBodyBuilder:
        self._ensure_open()
        self._reply_to = EmailAddress.coerce(address)
        return self

    def sender(self, address: EmailAddress | str) -> OutboundEmailBodyBuilder:
        """Override the client's default sender for this message only."""
        self._ensure_open()
        self._sender = EmailAddress.coerce(address)
        return self

    def tag(self, tag: str) -> OutboundEmailBodyBuilder:
        self._ensure_open()
        if not isinstance(tag, str) or not tag.strip():
            raise ValidationError("tag must be a non-empty string", errors=[{"field": "tag"}])
        if len(tag) > MAX_TAG_LENGTH:
            raise ValidationError(
                f"tag exceeds {MAX_TAG_LENGTH} characters", errors=[{"field": "tag"}]
            )
        self._tag = tag
        return self

    def metadata(self, metadata: Mapping[str, Any]) -> OutboundEmailBodyBuilder:
        """Attach key/value metadata; it must encode as a JSON object."""
        self._ensure_open()
        if not isinstance(metadata, Mapping):
            raise ValidationError("metadata must be a JSON object", errors=[{"field": "metadata"}])
        if any(not isinstance(key, str) for key in metadata):
            raise ValidationError("metadata keys must be strings", errors=[{"field": "metadata"}])
        try:
            # Round-trip through JSON: validates and takes a deep copy.
            copied = json.loads(json.dumps(dict(metadata), allow_nan=False))
        except (TypeError, ValueError) as exc:
            raise ValidationError(
                f"metadata is not JSON-serialisable: {exc}",
                errors=[{"field": "metadata"}],
                cause=exc,
            ) from exc
        self._metadata = MappingProxyType(copied)
        return self

    def track_opens(self, enabled: bool = True) -> OutboundEmailBodyBuilder:
        self._ensure_open()
        self._track_opens = bool(enabled)
        return self

    def track_links(self, mode: TrackLinks | str) -> OutboundEmailBodyBuilder:
        self._ensure_open()
        try:
            self._track_links = TrackLinks(mode)
        except ValueError as exc:
            raise ValidationError(
                f"Unknown track_links mode {mode!r}", errors=[{"field": "track_links"}]
            ) from exc
        return self

    def attach(self, attachment: Attachment) -> OutboundEmailBodyBuilder:
        self._ensure_open()
        if not isinstance(attachment, Attachment):
            raise ValidationError("attach() expects an Attachment", errors=[{"field": "attachments"}])
        self._attachments.append(attachment)
        return self

    def attachments(self, attachments: Iterable[Attachment]) -> OutboundEmailBodyBuilder:
        self._ensure_open()
        self._attachments = []
        for attachment in attachments:
            self.attach(attachment)
        return self

    def build(self) -> Result[OutboundEmailBody, ValidationError]:
        """Check the cross-field rules and freeze the message.

        An empty ``html_body`` or ``text_body`` counts as unset, so a message
        whose only body is ``""`` fails with ``MissingBodyError``.
        """
        self._ensure_open()
        self._built = True

        if not self._html_body and not self._text_body:
            return Err(MissingBodyError())
        if len(self._attachments) > self._max_attachments:
            return Err(TooManyAttachmentsError(len(self._attachments), self._max_attachments))
        total = sum(a.size for a in self._attachments)
        if total > MAX_MESSAGE_BYTES:
            return Err(MessageTooLargeError(total, MAX_MESSAGE_BYTES))

        return Ok(
            OutboundEmailBody(
                to=self._to,
                subject=self._subject,
                html_body=self._html_body,
                text_body=self._text_body,
                cc=self._cc,
                bcc=self._bcc,
                reply_to=self._reply_to,
                tag=self._tag,
                metadata=self._metadata,
                track_opens=self._track_opens,
                track_links=self._track_links,
                attachments=tuple(self._attachments),
                sender=self._sender,
            )
        )
