"""Resilience – backoff schedule."""
from __future__ import annotations

import abc
import dataclasses


class BackoffStrategy(abc.ABC):
    """Base wait (seconds) before retry number *retry*, counting from 0."""

    @abc.abstractmethod
    def compute(self, retry: int) -> float: ...


@dataclasses.dataclass(frozen=True)
class ExponentialBackoff(BackoffStrategy):
    """``base_delay * 2**retry``, never above ``max_delay``.

    The schedule is non-decreasing in *retry*, which the retry policy relies
    on when it clamps jittered waits.
    """

    base_delay: float = 0.5
    max_delay: float = 8.0

    def __post_init__(self) -> None:
        if self.base_delay < 0 or self.max_delay < self.base_delay:
            raise ValueError(
                f"need 0 <= base_delay <= max_delay, got {self.base_delay} and {self.max_delay}"
            )

    def compute(self, retry: int) -> float:
        if retry < 0:
            raise ValueError(f"retry must be >= 0, got {retry}")
        return min(self.base_delay * (1 << min(retry, 62)), self.max_delay)


__all__ = ["BackoffStrategy", "ExponentialBackoff"]
