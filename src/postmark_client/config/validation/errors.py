"""Config validation errors.

Messages name the offending setting. The value is echoed back unless the
setting is secret.
"""
from __future__ import annotations

from postmark_client.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Client configuration is incomplete or invalid."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"{setting_name} is required but was not provided", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A value is present but unusable; ``value`` is ``None`` for secrets."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, *, secret: bool = False) -> None:
        shown = "<hidden>" if secret else repr(value)
        super().__init__(f"{setting_name}={shown} rejected: {reason}", detail={"setting": setting_name})
        self.setting_name = setting_name
        self.value = None if secret else value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
