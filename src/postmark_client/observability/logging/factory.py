"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

from postmark_client.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from postmark_client.observability.logging.processors import DropMessageContent


class JsonLoggerFactory:
    """Opt-in structlog setup for applications embedding the client.

    The library itself only calls :func:`get_logger`; nothing is configured
    on import.
    """

    @staticmethod
    def processors(
        sensitive_fields: frozenset[str] | None = DEFAULT_SENSITIVE_FIELDS,
        drop_message_content: bool = True,
    ) -> list[Any]:
        """Pre-render chain shared by structlog and foreign stdlib records."""
        chain: list[Any] = [structlog.contextvars.merge_contextvars]
        if sensitive_fields:
            chain.append(SensitiveFieldsFilter(sensitive_fields))
        if drop_message_content:
            chain.append(DropMessageContent())
        chain += [
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
        ]
        return chain

    @classmethod
    def configure(
        cls,
        level: int = logging.INFO,
        sensitive_fields: frozenset[str] | None = DEFAULT_SENSITIVE_FIELDS,
        drop_message_content: bool = True,
        *,
        stream: TextIO | None = None,
        json_output: bool = True,
    ) -> None:
        """Send every log line, structlog or stdlib, to *stream* (stderr by default).

        ``json_output=False`` switches to structlog's console renderer for local
        development; redaction applies either way.
        """
        chain = cls.processors(sensitive_fields, drop_message_content)
        renderer: Any = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()

        structlog.configure(
            processors=[*chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=chain,
                processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            )
        )
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
