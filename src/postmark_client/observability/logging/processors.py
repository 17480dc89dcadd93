"""Observability – structlog processors and the get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

# Request-payload keys whose values are message content, not diagnostics.
MESSAGE_CONTENT_FIELDS: frozenset[str] = frozenset({
    "HtmlBody", "TextBody", "Content", "Metadata", "html_body", "text_body", "metadata",
})


class DropMessageContent:
    """structlog processor that strips message bodies and attachment data.

    Anything logged from a request payload keeps its envelope (recipients,
    subject, tag) but loses the content, however deeply it is nested.
    """

    def __init__(self, fields: frozenset[str] = MESSAGE_CONTENT_FIELDS) -> None:
        self._fields = fields

    def _strip(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: self._strip(v) for k, v in value.items() if k not in self._fields}
        if isinstance(value, list):
            return [self._strip(item) for item in value]
        return value

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self._strip(event_dict)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally with *initial_values* bound.

    Loggers are lazy proxies, so calling this at import time is safe even
    before :class:`JsonLoggerFactory` (or any structlog configuration) runs.
    """
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


__all__ = ["MESSAGE_CONTENT_FIELDS", "DropMessageContent", "get_logger"]
