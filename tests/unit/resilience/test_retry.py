"""Unit tests for RetryPolicy and backoff/jitter strategies."""

from __future__ import annotations

import asyncio
import random

import pytest

from postmark_client.kernel.errors import (
    ApiError,
    RateLimitedError,
    SendError,
    ServerError,
    TransportError,
)
from postmark_client.resilience.retry import (
    EqualJitter,
    ExponentialBackoff,
    FullJitter,
    NoJitter,
    RetryPolicy,
)


class _SleepRecorder:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


# ---------------------------------------------------------------------------
# BackoffStrategy
# ---------------------------------------------------------------------------


class TestExponentialBackoff:
    def test_doubles_each_retry(self) -> None:
        b = ExponentialBackoff(base_delay=1.0, max_delay=100.0)
        assert [b.compute(i) for i in range(4)] == [1.0, 2.0, 4.0, 8.0]

    def test_capped_at_max(self) -> None:
        assert ExponentialBackoff(base_delay=1.0, max_delay=5.0).compute(10) == 5.0

    def test_default_values(self) -> None:
        b = ExponentialBackoff()
        assert b.compute(0) == 0.5
        assert b.compute(1) == 1.0
        assert b.compute(100) == 8.0

    def test_huge_retry_does_not_overflow(self) -> None:
        assert ExponentialBackoff().compute(10_000) == 8.0

    @pytest.mark.parametrize(("base", "cap"), [(-1.0, 8.0), (4.0, 1.0)])
    def test_invalid_bounds_rejected(self, base: float, cap: float) -> None:
        with pytest.raises(ValueError):
            ExponentialBackoff(base_delay=base, max_delay=cap)

    def test_non_decreasing(self) -> None:
        b = ExponentialBackoff(base_delay=0.3, max_delay=5.0)
        delays = [b.compute(i) for i in range(20)]
        assert delays == sorted(delays)


# ---------------------------------------------------------------------------
# JitterStrategy
# ---------------------------------------------------------------------------


class TestJitter:
    def test_no_jitter(self) -> None:
        assert NoJitter().apply(3.0) == 3.0

    def test_full_jitter_bounds(self) -> None:
        j = FullJitter(random.Random(7))
        for _ in range(100):
            assert 0.0 <= j.apply(2.0) <= 2.0

    def test_equal_jitter_bounds(self) -> None:
        j = EqualJitter(random.Random(7))
        for _ in range(100):
            assert 1.0 <= j.apply(2.0) <= 2.0


# ---------------------------------------------------------------------------
# RetryPolicy
# ---------------------------------------------------------------------------


class TestRetryPolicy:
    def test_success_first_try(self) -> None:
        sleep = _SleepRecorder()
        policy = RetryPolicy(max_attempts=3, sleep=sleep)

        async def ok() -> str:
            return "done"

        assert asyncio.run(policy.execute(ok)) == "done"
        assert sleep.delays == []

    def test_retries_transient_then_succeeds(self) -> None:
        sleep = _SleepRecorder()
        calls = {"n": 0}

        async def flaky() -> str:
            calls["n"] += 1
            if calls["n"] < 3:
                raise TransportError("down")
            return "ok"

        policy = RetryPolicy(max_attempts=4, jitter=NoJitter(), retryable_exceptions=(SendError,), sleep=sleep)
        assert asyncio.run(policy.execute(flaky)) == "ok"
        assert calls["n"] == 3
        assert sleep.delays == [0.5, 1.0]

    def test_exhausted_reraises_last(self) -> None:
        sleep = _SleepRecorder()

        async def always() -> None:
            raise ServerError("unavailable", status_code=503)

        policy = RetryPolicy(max_attempts=3, retryable_exceptions=(SendError,), sleep=sleep)
        with pytest.raises(ServerError):
            asyncio.run(policy.execute(always))
        assert len(sleep.delays) == 2

    def test_permanent_error_not_retried(self) -> None:
        sleep = _SleepRecorder()
        calls = {"n": 0}

        async def rejected() -> None:
            calls["n"] += 1
            raise ApiError("bad", status_code=422, error_code=300)

        policy = RetryPolicy(max_attempts=5, retryable_exceptions=(SendError,), sleep=sleep)
        with pytest.raises(ApiError):
            asyncio.run(policy.execute(rejected))
        assert calls["n"] == 1
        assert sleep.delays == []

    def test_non_matching_type_not_retried(self) -> None:
        calls = {"n": 0}

        async def broken() -> None:
            calls["n"] += 1
            raise KeyError("x")

        policy = RetryPolicy(max_attempts=5, retryable_exceptions=(SendError,), sleep=_SleepRecorder())
        with pytest.raises(KeyError):
            asyncio.run(policy.execute(broken))
        assert calls["n"] == 1

    def test_delays_never_shrink(self) -> None:
        sleep = _SleepRecorder()

        async def always() -> None:
            raise TransportError("down")

        policy = RetryPolicy(
            max_attempts=8,
            backoff=ExponentialBackoff(base_delay=0.5, max_delay=2.0),
            jitter=EqualJitter(random.Random(1)),
            sleep=sleep,
        )
        with pytest.raises(TransportError):
            asyncio.run(policy.execute(always))
        assert len(sleep.delays) == 7
        assert sleep.delays == sorted(sleep.delays)

    def test_retry_after_hint_is_minimum(self) -> None:
        sleep = _SleepRecorder()
        calls = {"n": 0}

        async def limited() -> str:
            calls["n"] += 1
            if calls["n"] == 1:
                raise RateLimitedError(retry_after_seconds=3.0)
            return "ok"

        policy = RetryPolicy(max_attempts=2, jitter=NoJitter(), sleep=sleep)
        assert asyncio.run(policy.execute(limited)) == "ok"
        assert sleep.delays == [3.0]

    def test_invalid_max_attempts(self) -> None:
        with pytest.raises(ValueError):
            RetryPolicy(max_attempts=0)

    def test_retry_after_hint_is_capped(self) -> None:
        sleep = _SleepRecorder()
        calls = {"n": 0}

        async def limited() -> str:
            calls["n"] += 1
            if calls["n"] == 1:
                raise RateLimitedError(retry_after_seconds=86_400.0)
            return "ok"

        policy = RetryPolicy(max_attempts=2, jitter=NoJitter(), sleep=sleep, max_retry_after=30.0)
        assert asyncio.run(policy.execute(limited)) == "ok"
        assert sleep.delays == [30.0]

    @pytest.mark.parametrize("cap", [-1.0, float("inf"), float("nan")])
    def test_invalid_max_retry_after(self, cap: float) -> None:
        with pytest.raises(ValueError):
            RetryPolicy(max_retry_after=cap)
