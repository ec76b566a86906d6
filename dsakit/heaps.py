"""A binary max-heap and heap-based selection helpers."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import Any


class MaxHeap:
    """A max-heap kept in an array, largest value at index 0."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)
        for index in range(len(self._items) // 2 - 1, -1, -1):
            self._sift_down(index)

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] > items[largest]:
                    largest = child
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not items[parent] < items[index]:
                return
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def push(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> Any:
        """Remove and return the largest value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("heap is empty")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> Any:
        """Return the largest value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("heap is empty")
        return self._items[0]

    def remove(self, value: Any) -> None:
        """Remove the first stored occurrence of ``value``; raise ValueError if absent."""
        try:
            index = self._items.index(value)
        except ValueError:
            raise ValueError(f"value {value!r} not found in heap") from None
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
            self._sift_down(index)
            self._sift_up(index)

    def level_order(self) -> list[Any]:
        """Return the stored values level by level, left to right."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


def _check_k(values: Sequence[Any], k: int) -> None:
    if not 0 < k <= len(values):
        raise ValueError(f"k={k} is out of range for {len(values)} values")


def kth_largest(values: Iterable[Any], k: int) -> Any:
    """Return the ``k``-th largest value (1-based, duplicates counted)."""
    items = list(values)
    _check_k(items, k)
    return heapq.nlargest(k, items)[-1]


def kth_smallest(values: Iterable[Any], k: int) -> Any:
    """Return the ``k``-th smallest value (1-based, duplicates counted)."""
    items = list(values)
    _check_k(items, k)
    return heapq.nsmallest(k, items)[-1]


def top_k_frequent(values: Iterable[Hashable], k: int) -> list[Hashable]:
    """Return up to ``k`` values, most frequent first, larger value first on ties."""
    counts = Counter(values)
    ranked = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    return [value for value, _ in ranked[: max(k, 0)]]