"""Domain errors – raised while composing a message, before any network call."""

from __future__ import annotations

from typing import Any

from postmark_client.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a message composition rule is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """An object was used in a way its lifecycle does not allow."""

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidEmailAddressError(ValidationError):
    """The string is not a plausible ``local-part@domain`` address."""

    default_code = "invalid_email_address"

    def __init__(self, raw: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid email address {raw!r}: {reason}",
            errors=[{"field": "email", "reason": reason}],
            **kwargs,
        )
        self.raw = raw
        self.reason = reason


class MissingBodyError(ValidationError):
    """Neither an HTML nor a plain-text body was set."""

    default_code = "missing_body"

    def __init__(self, message: str = "At least one of html_body or text_body is required", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class TooManyAttachmentsError(ValidationError):
    default_code = "too_many_attachments"

    def __init__(self, count: int, limit: int, **kwargs: Any) -> None:
        super().__init__(f"{count} attachments exceed the limit of {limit}", **kwargs)
        self.count = count
        self.limit = limit


class TooManyRecipientsError(ValidationError):
    default_code = "too_many_recipients"

    def __init__(self, field: str, count: int, limit: int, **kwargs: Any) -> None:
        super().__init__(
            f"{count} {field} recipients exceed the limit of {limit}",
            errors=[{"field": field, "reason": "too_many_recipients"}],
            **kwargs,
        )
        self.field = field
        self.count = count
        self.limit = limit


class MessageTooLargeError(ValidationError):
    """Combined attachment payload exceeds the per-message size limit."""

    default_code = "message_too_large"

    def __init__(self, size: int, limit: int, **kwargs: Any) -> None:
        super().__init__(f"Attachments total {size} bytes, limit is {limit} bytes", **kwargs)
        self.size = size
        self.limit = limit


class AttachmentError(DomainError):
    """An attachment could not be loaded or does not meet the API limits."""

    default_code = "attachment_error"

    def __init__(self, message: str, *, name: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.name = name


class AttachmentNotFoundError(AttachmentError):
    default_code = "attachment_not_found"

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(f"Attachment file '{path}' not found", **kwargs)
        self.path = path


class EmptyAttachmentError(AttachmentError):
    default_code = "attachment_empty"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(f"Attachment '{name}' has no content", name=name, **kwargs)


class AttachmentTooLargeError(AttachmentError):
    default_code = "attachment_too_large"

    def __init__(self, name: str, size: int, limit: int, **kwargs: Any) -> None:
        super().__init__(
            f"Attachment '{name}' is {size} bytes, limit is {limit} bytes",
            name=name,
            **kwargs,
        )
        self.size = size
        self.limit = limit


__all__ = [
    "AttachmentError",
    "AttachmentNotFoundError",
    "AttachmentTooLargeError",
    "DomainError",
    "EmptyAttachmentError",
    "InvalidEmailAddressError",
    "InvariantViolationError",
    "MessageTooLargeError",
    "MissingBodyError",
    "TooManyAttachmentsError",
    "TooManyRecipientsError",
    "ValidationError",
]
