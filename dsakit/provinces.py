"""Counting connected groups in an adjacency matrix."""

from __future__ import annotations

from collections.abc import Sequence


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Return the number of connected components of a square 0/1 adjacency matrix."""
    size = len(is_connected)
    if any(len(row) != size for row in is_connected):
        raise ValueError("adjacency matrix must be square")
    visited = [False] * size
    provinces = 0
    for start in range(size):
        if visited[start]:
            continue
        provinces += 1
        visited[start] = True
        stack = [start]
        while stack:
            city = stack.pop()
            for neighbour, linked in enumerate(is_connected[city]):
                if linked == 1 and not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
    return provinces