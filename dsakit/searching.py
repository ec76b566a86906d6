"""Substring search and element search in sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def naive_find(text: str, pattern: str) -> int:
    """Return the first index of ``pattern`` in ``text`` by brute force, or -1."""
    width = len(pattern)
    for start in range(len(text) - width + 1):
        if text[start:start + width] == pattern:
            return start
    return -1


def prefix_table(pattern: str) -> list[int]:
    """Return the failure table used by Knuth-Morris-Pratt matching.

    Entry ``i`` is the length of the longest proper prefix of
    ``pattern[:i + 1]`` that is also a suffix of it.
    """
    table = [0] * len(pattern)
    border = 0
    for i, char in enumerate(pattern[1:], start=1):
        while border and char != pattern[border]:
            border = table[border - 1]
        if char == pattern[border]:
            border += 1
        table[i] = border
    return table


def kmp_find(text: str, pattern: str) -> int:
    """Return the first index of ``pattern`` in ``text`` using KMP, or -1."""
    if not pattern:
        return 0
    table = prefix_table(pattern)
    matched = 0
    for i, char in enumerate(text):
        while matched and char != pattern[matched]:
            matched = table[matched - 1]
        if char == pattern[matched]:
            matched += 1
            if matched == len(pattern):
                return i - matched + 1
    return -1


def binary_search(data: Sequence[Any], item: Any) -> int:
    """Return an index of ``item`` in the ascending ``data``, or -1."""
    low, high = 0, len(data) - 1
    while low <= high:
        mid = (low + high) // 2
        if item < data[mid]:
            high = mid - 1
        elif item > data[mid]:
            low = mid + 1
        else:
            return mid
    return -1


def linear_search(data: Sequence[Any], item: Any) -> int:
    """Return the index of the first element equal to ``item``, or -1."""
    return next((index for index, value in enumerate(data) if value == item), -1)