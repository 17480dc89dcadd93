"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from postmark_client.kernel.types import SecretToken

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "server_token", "auth_token", "token", "x-postmark-server-token",
    "authorization", "password", "secret", "api_key",
})


class SensitiveFieldsFilter:
    """Mask credentials in log events.

    A value is replaced with ``[REDACTED]`` when its key is sensitive
    (case-insensitive) or when it is a :class:`SecretToken`, wherever it
    sits in nested mappings and sequences.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def _is_sensitive(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._fields

    def redact(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Top-level keys only."""
        return {
            k: self.REDACTED if self._is_sensitive(k) or isinstance(v, SecretToken) else v
            for k, v in data.items()
        }

    def redact_deep(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {k: self.REDACTED if self._is_sensitive(k) else self._scrub(v) for k, v in data.items()}

    def _scrub(self, value: Any) -> Any:
        if isinstance(value, SecretToken):
            return self.REDACTED
        if isinstance(value, Mapping):
            return self.redact_deep(value)
        if type(value) is list:
            return [self._scrub(item) for item in value]
        if type(value) is tuple:
            return tuple(self._scrub(item) for item in value)
        return value

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
