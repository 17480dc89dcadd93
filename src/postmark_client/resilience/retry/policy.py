"""Resilience – RetryPolicy."""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

from postmark_client.observability.logging import get_logger
from postmark_client.resilience.retry.backoff import BackoffStrategy, ExponentialBackoff
from postmark_client.resilience.retry.jitter import EqualJitter, JitterStrategy

T = TypeVar("T")
logger = get_logger(__name__)


class RetryPolicy:
    """Retry an async call on transient failures with backoff and jitter.

    An exception is retried when it is an instance of
    ``retryable_exceptions`` and does not set ``transient = False``. When it
    carries ``retry_after_seconds`` the wait is at least that long, with the
    hint capped at ``max_retry_after`` seconds. Waits never shrink from one
    retry to the next.
    """

    def __init__(
        self,
        max_attempts: int = 4,
        backoff: BackoffStrategy | None = None,
        jitter: JitterStrategy | None = None,
        retryable_exceptions: tuple[type[Exception], ...] = (Exception,),
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
        max_retry_after: float = 60.0,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        if not 0 <= max_retry_after < float("inf"):
            raise ValueError(f"max_retry_after must be finite and >= 0, got {max_retry_after}")
        self.max_attempts = max_attempts
        self.backoff = backoff or ExponentialBackoff()
        self.jitter = jitter or EqualJitter()
        self.retryable_exceptions = retryable_exceptions
        self.max_retry_after = max_retry_after
        self._sleep = sleep

    def _should_retry(self, exc: Exception) -> bool:
        return isinstance(exc, self.retryable_exceptions) and getattr(exc, "transient", True)

    def _delay(self, retry: int, exc: Exception, previous: float) -> float:
        delay = self.jitter.apply(self.backoff.compute(retry))
        hint = getattr(exc, "retry_after_seconds", None)
        if hint:
            delay = max(delay, min(float(hint), self.max_retry_after))
        return max(delay, previous)

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        """Await *func()*, retrying per policy; the last failure is re-raised."""
        previous = 0.0
        for attempt in range(1, self.max_attempts + 1):
            try:
                return await func()
            except Exception as exc:
                if not self._should_retry(exc) or attempt == self.max_attempts:
                    raise
                previous = self._delay(attempt - 1, exc, previous)
                logger.debug(
                    "retry.scheduled",
                    attempt=attempt,
                    max_attempts=self.max_attempts,
                    delay=round(previous, 3),
                    error=type(exc).__name__,
                )
                await self._sleep(previous)
        raise AssertionError("unreachable")  # pragma: no cover


__all__ = ["RetryPolicy"]
