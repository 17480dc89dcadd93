"""Observability – structured logging helpers."""
from postmark_client.observability.logging.factory import JsonLoggerFactory
from postmark_client.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from postmark_client.observability.logging.processors import MESSAGE_CONTENT_FIELDS, DropMessageContent, get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "MESSAGE_CONTENT_FIELDS",
    "DropMessageContent",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
