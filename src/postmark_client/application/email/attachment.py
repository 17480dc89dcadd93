"""Application email – Attachment value object."""
from __future__ import annotations

import base64
import binascii
import mimetypes
import os
from dataclasses import dataclass, field
from pathlib import Path

from postmark_client.kernel.errors import (
    AttachmentError,
    AttachmentNotFoundError,
    AttachmentTooLargeError,
    EmptyAttachmentError,
)
from postmark_client.kernel.types import Err, Ok, Result

__all__ = ["DEFAULT_CONTENT_TYPE", "MAX_ATTACHMENT_BYTES", "Attachment", "guess_content_type"]

DEFAULT_CONTENT_TYPE = "application/octet-stream"
# Postmark caps a whole message at 10 MB; a single attachment can be no larger.
MAX_ATTACHMENT_BYTES = 10 * 1024 * 1024

_SEPARATORS = ("/", "\\")


def guess_content_type(filename: str) -> str:
    """Infer a MIME type from *filename*'s extension."""
    content_type, _ = mimetypes.guess_type(filename, strict=False)
    return content_type or DEFAULT_CONTENT_TYPE


@dataclass(frozen=True)
class Attachment:
    """A file payload carried by an outbound message.

    ``content`` is base64 text, exactly what the API expects on the wire.
    ``content_id`` makes the attachment addressable from the HTML body
    (``<img src="cid:logo.png">``).
    """

    name: str
    content_type: str
    content: str
    content_id: str | None = None
    _size: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise AttachmentError("Attachment name must not be empty")
        try:
            data = base64.b64decode(self.content, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise AttachmentError(
                f"Attachment '{self.name}' is not valid base64", name=self.name, cause=exc
            ) from exc
        if not data:
            raise EmptyAttachmentError(self.name)
        object.__setattr__(self, "_size", len(data))
        if not self.content_type:
            object.__setattr__(self, "content_type", guess_content_type(self.name))
        if self.content_id is not None and not self.content_id.startswith("cid:"):
            object.__setattr__(self, "content_id", f"cid:{self.content_id}")

    def __repr__(self) -> str:
        return (
            f"Attachment(name={self.name!r}, content_type={self.content_type!r}, "
            f"size={self.size}, content_id={self.content_id!r})"
        )

    @property
    def size(self) -> int:
        """Decoded payload size in bytes."""
        return self._size

    def decode(self) -> bytes:
        return base64.b64decode(self.content, validate=True)

    @classmethod
    def from_bytes(
        cls,
        display_name: str,
        content_type: str | None,
        data: bytes,
        *,
        content_id: str | None = None,
        max_bytes: int = MAX_ATTACHMENT_BYTES,
    ) -> Result[Attachment, AttachmentError]:
        """Encode in-memory *data*; ``content_type=None`` infers it from the name."""
        if not display_name:
            return Err(AttachmentError("Attachment name must not be empty"))
        if not data:
            return Err(EmptyAttachmentError(display_name))
        if len(data) > max_bytes:
            return Err(AttachmentTooLargeError(display_name, len(data), max_bytes))
        return Ok(
            cls(
                name=display_name,
                content_type=content_type or guess_content_type(display_name),
                content=base64.b64encode(data).decode("ascii"),
                content_id=content_id,
            )
        )

    @classmethod
    def from_base64(
        cls,
        display_name: str,
        content_type: str | None,
        content: str,
        *,
        content_id: str | None = None,
        max_bytes: int = MAX_ATTACHMENT_BYTES,
    ) -> Result[Attachment, AttachmentError]:
        """Validate already-encoded *content* (e.g. relayed from another API)."""
        try:
            data = base64.b64decode(content, validate=True)
        except (binascii.Error, ValueError) as exc:
            return Err(AttachmentError(f"Attachment '{display_name}' is not valid base64", name=display_name, cause=exc))
        return cls.from_bytes(display_name, content_type, data, content_id=content_id, max_bytes=max_bytes)

    @classmethod
    def from_file(
        cls,
        display_name: str,
        path: str | os.PathLike[str],
        *,
        content_id: str | None = None,
        max_bytes: int = MAX_ATTACHMENT_BYTES,
    ) -> Result[Attachment, AttachmentError]:
        """Read *path* and encode it under *display_name*.

        The content type is inferred from *display_name*, never from *path*.
        """
        if any(sep in display_name for sep in _SEPARATORS):
            return Err(
                AttachmentError(
                    f"Attachment name {display_name!r} must not contain path separators",
                    name=display_name,
                )
            )
        file_path = Path(path)
        if not file_path.is_file():
            return Err(AttachmentNotFoundError(str(path)))
        try:
            size = file_path.stat().st_size
            if size > max_bytes:
                return Err(AttachmentTooLargeError(display_name, size, max_bytes))
            data = file_path.read_bytes()
        except FileNotFoundError:
            return Err(AttachmentNotFoundError(str(path)))
        except OSError as exc:
            return Err(AttachmentError(f"Cannot read attachment '{path}': {exc}", name=display_name, cause=exc))
        return cls.from_bytes(display_name, None, data, content_id=content_id, max_bytes=max_bytes)
