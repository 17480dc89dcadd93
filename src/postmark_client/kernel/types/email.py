"""Email address value object."""

from __future__ import annotations

import dataclasses

from postmark_client.kernel.errors.domain import InvalidEmailAddressError
from postmark_client.kernel.types.result import Err, Ok, Result


def _check(raw: str) -> str | None:
    """Return the reason *raw* is rejected, or ``None`` when it is plausible."""
    if not raw:
        return "address is empty"
    if any(ch.isspace() for ch in raw):
        return "address contains whitespace"
    if raw.count("@") != 1:
        return "address must contain exactly one '@'"
    local, domain = raw.split("@")
    if not local:
        return "local part is empty"
    if "." not in domain:
        return "domain must contain at least one '.'"
    if any(not label for label in domain.split(".")):
        return "domain contains an empty label"
    return None


@dataclasses.dataclass(frozen=True, slots=True)
class EmailAddress:
    """A syntactically plausible ``local-part@domain`` address.

    Casing is preserved. Construction is the only validation point, so an
    instance is always valid.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidEmailAddressError(repr(self.value), "address must be a string")
        reason = _check(self.value)
        if reason is not None:
            raise InvalidEmailAddressError(self.value, reason)

    @classmethod
    def parse(cls, raw: str) -> Result[EmailAddress, InvalidEmailAddressError]:
        """Validate *raw* without raising."""
        try:
            return Ok(cls(raw))
        except InvalidEmailAddressError as exc:
            return Err(exc)

    @classmethod
    def coerce(cls, value: EmailAddress | str) -> EmailAddress:
        """Accept an existing address or a raw string (raising on invalid input)."""
        if isinstance(value, EmailAddress):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.value

    @property
    def local_part(self) -> str:
        return self.value.split("@", 1)[0]

    @property
    def domain(self) -> str:
        """Return the domain portion of the address (everything after ``@``)."""
        return self.value.split("@", 1)[1]


__all__ = ["EmailAddress"]
