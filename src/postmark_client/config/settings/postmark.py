"""Config settings – PostmarkSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar
from urllib.parse import urlsplit

from postmark_client.config.settings.base import Settings
from postmark_client.config.validation import InvalidSettingValueError

DEFAULT_BASE_URL = "https://api.postmarkapp.com"


@dataclasses.dataclass
class PostmarkSettings(Settings):
    """Client configuration read from ``POSTMARK_*`` environment variables.

    ``server_token`` is excluded from ``repr`` and masked by ``safe_dict()``.
    """

    _prefix: ClassVar[str] = "POSTMARK"
    _secret_fields: ClassVar[frozenset[str]] = frozenset({"server_token"})

    server_token: str = dataclasses.field(repr=False)
    sender: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0
    max_retries: int = 3
    backoff_base_seconds: float = 0.5
    backoff_max_seconds: float = 8.0
    batch_concurrency: int = 1

    def _validate(self) -> None:
        if urlsplit(self.base_url).scheme not in ("http", "https"):
            raise InvalidSettingValueError("base_url", self.base_url, "must be an http(s) URL")
        if self.timeout_seconds <= 0:
            raise InvalidSettingValueError("timeout_seconds", self.timeout_seconds, "must be positive")
        if self.max_retries < 0:
            raise InvalidSettingValueError("max_retries", self.max_retries, "must not be negative")
        if self.backoff_base_seconds < 0 or self.backoff_max_seconds < self.backoff_base_seconds:
            raise InvalidSettingValueError(
                "backoff_max_seconds",
                self.backoff_max_seconds,
                "must be >= backoff_base_seconds >= 0",
            )
        if self.batch_concurrency < 1:
            raise InvalidSettingValueError("batch_concurrency", self.batch_concurrency, "must be at least 1")


__all__ = ["DEFAULT_BASE_URL", "PostmarkSettings"]
