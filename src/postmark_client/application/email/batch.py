"""Application email – splitting messages into API-sized batches."""
from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from postmark_client.application.email.body import OutboundEmailBody

__all__ = ["MAX_BATCH_SIZE", "Batch", "partition"]

T = TypeVar("T")

# The batch endpoint accepts at most 500 messages per request.
MAX_BATCH_SIZE = 500

type Batch = tuple[OutboundEmailBody, ...]


def partition(items: Sequence[T], max_size: int = MAX_BATCH_SIZE) -> list[tuple[T, ...]]:
    """Split *items* into contiguous chunks of at most *max_size*, keeping order.

    An empty input yields an empty list; only the last chunk may be short.
    """
    if max_size < 1:
        raise ValueError(f"max_size must be positive, got {max_size}")
    return [tuple(items[start:start + max_size]) for start in range(0, len(items), max_size)]
