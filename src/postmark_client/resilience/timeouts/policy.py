"""Resilience – TimeoutPolicy."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Awaitable, Callable, TypeVar

from postmark_client.kernel.errors import SendTimeoutError

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class TimeoutPolicy:
    """Bound a whole operation (all attempts and backoff waits) by a deadline."""

    timeout_seconds: float | None

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        if self.timeout_seconds is None:
            return await func()
        try:
            async with asyncio.timeout(self.timeout_seconds):
                return await func()
        except TimeoutError as exc:
            raise SendTimeoutError(
                f"Operation exceeded its deadline of {self.timeout_seconds}s",
                timeout_seconds=self.timeout_seconds,
            ) from exc


__all__ = ["TimeoutPolicy"]
