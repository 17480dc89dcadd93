"""Result type: ``Ok`` carries a value, ``Err`` carries the exception.

Operations whose failures are expected outcomes (invalid input, a rejected
message) return a ``Result``. ``unwrap()`` turns it back into the raising
style.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Literal, NoReturn, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"unwrap_err() called on {self!r}")

    def unwrap_or(self, default: object) -> T:  # noqa: ARG002
        return self.value

    def map(self, func: Callable[[T], U]) -> Ok[U]:
        return Ok(func(self.value))


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, func: Callable[..., object]) -> Err[E]:  # noqa: ARG002
        return self


type Result[T, E] = Ok[T] | Err[E]

__all__ = ["Err", "Ok", "Result"]
