"""Resilience – retry with exponential backoff and jitter."""
from postmark_client.resilience.retry.backoff import BackoffStrategy, ExponentialBackoff
from postmark_client.resilience.retry.jitter import EqualJitter, FullJitter, JitterStrategy, NoJitter
from postmark_client.resilience.retry.policy import RetryPolicy

__all__ = [
    "BackoffStrategy", "EqualJitter", "ExponentialBackoff",
    "FullJitter", "JitterStrategy", "NoJitter", "RetryPolicy",
]
