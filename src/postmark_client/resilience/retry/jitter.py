"""Resilience – jitter applied on top of the backoff schedule."""
from __future__ import annotations

import abc
import random


class JitterStrategy(abc.ABC):
    @abc.abstractmethod
    def apply(self, delay: float) -> float:
        """Return a wait in ``[0, delay]`` derived from *delay*."""


class NoJitter(JitterStrategy):
    """Deterministic waits; handy for tests and debugging."""

    def apply(self, delay: float) -> float:
        return delay


class _RandomJitter(JitterStrategy):
    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)


class FullJitter(_RandomJitter):
    """Uniform in ``[0, delay]``."""

    def apply(self, delay: float) -> float:
        return self._rng.uniform(0.0, delay)


class EqualJitter(_RandomJitter):
    """Uniform in ``[delay/2, delay]``, keeping at least half the backoff."""

    def apply(self, delay: float) -> float:
        return delay / 2 + self._rng.uniform(0.0, delay / 2)


__all__ = ["EqualJitter", "FullJitter", "JitterStrategy", "NoJitter"]
