"""Secret value object for the server API token."""

from __future__ import annotations

import dataclasses
import hmac

from postmark_client.kernel.errors.domain import ValidationError

_MASK = "**********"


@dataclasses.dataclass(frozen=True, slots=True, repr=False, eq=False)
class SecretToken:
    """Opaque wrapper whose ``repr``/``str`` never reveal the token.

    Only the transport boundary calls :meth:`expose` to build the
    authentication header.
    """

    _value: str

    def __post_init__(self) -> None:
        if not isinstance(self._value, str) or not self._value.strip():
            raise ValidationError("Server token must be a non-empty string")

    def expose(self) -> str:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretToken):
            return NotImplemented
        return hmac.compare_digest(self._value.encode(), other._value.encode())

    def __hash__(self) -> int:
        return hash((SecretToken, self._value))

    def __repr__(self) -> str:
        return f"SecretToken('{_MASK}')"

    def __str__(self) -> str:
        return _MASK


__all__ = ["SecretToken"]
