"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

_MASK = "**********"


@dataclasses.dataclass
class Settings:
    """Environment-backed settings; field ``foo`` is read from ``<PREFIX>_FOO``.

    Fields listed in ``_secret_fields`` are masked by :meth:`safe_dict` and
    never echoed in validation errors.
    """

    _prefix: ClassVar[str] = ""
    _secret_fields: ClassVar[frozenset[str]] = frozenset()

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def is_secret(cls, field_name: str) -> bool:
        return field_name in cls._secret_fields

    def safe_dict(self) -> dict[str, Any]:
        """Field values with secrets masked, suitable for logging."""
        return {
            f.name: _MASK if self.is_secret(f.name) else getattr(self, f.name)
            for f in dataclasses.fields(self)
        }

    def _validate(self) -> None:
        """Cross-field checks; subclasses raise ``InvalidSettingValueError``."""


__all__ = ["Settings"]
