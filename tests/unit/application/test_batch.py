"""Unit tests for batch partitioning."""
from __future__ import annotations

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from postmark_client.application.email import MAX_BATCH_SIZE, partition


class TestPartition:
    def test_empty(self) -> None:
        assert partition([]) == []

    def test_exact_multiple(self) -> None:
        chunks = partition(list(range(1000)))
        assert [len(c) for c in chunks] == [500, 500]

    def test_remainder_last(self) -> None:
        chunks = partition(list(range(600)))
        assert [len(c) for c in chunks] == [500, 100]

    def test_custom_size(self) -> None:
        assert partition("abcde", 2) == [("a", "b"), ("c", "d"), ("e",)]

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_size(self, size: int) -> None:
        with pytest.raises(ValueError):
            partition([1, 2], size)

    @given(st.lists(st.integers(), max_size=1500), st.integers(min_value=1, max_value=MAX_BATCH_SIZE))
    def test_chunks_concatenate_to_input(self, items: list[int], size: int) -> None:
        chunks = partition(items, size)
        assert len(chunks) == math.ceil(len(items) / size)
        assert [x for chunk in chunks for x in chunk] == items
        assert all(1 <= len(c) <= size for c in chunks)
        assert all(len(c) == size for c in chunks[:-1])
