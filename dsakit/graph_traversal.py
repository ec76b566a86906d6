"""Adjacency lists and breadth-first and depth-first traversal."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def build_adjacency(
    size: int, edges: Iterable[Sequence[int]], directed: bool = False
) -> list[list[int]]:
    """Return adjacency lists for vertices ``0 .. size - 1``.

    Undirected edges are recorded in both directions.
    """
    adjacency: list[list[int]] = [[] for _ in range(size)]
    for u, v in edges:
        if not (0 <= u < size and 0 <= v < size):
            raise IndexError(f"edge ({u}, {v}) is out of range")
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def _check_start(adjacency: Sequence[Sequence[int]], start: int) -> None:
    if not 0 <= start < len(adjacency):
        raise IndexError(f"start vertex {start} is out of range")


def _bfs_from(
    adjacency: Sequence[Sequence[int]], start: int, visited: list[bool]
) -> list[int]:
    order: list[int] = []
    visited[start] = True
    queue = deque([start])
    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbour in adjacency[current]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def bfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in breadth-first order."""
    _check_start(adjacency, start)
    return _bfs_from(adjacency, start, [False] * len(adjacency))


def bfs_all(adjacency: Sequence[Sequence[int]], vertex_count: int) -> list[int]:
    """Return a breadth-first order covering every component.

    A new search starts from each of the vertices ``0 .. vertex_count - 1``
    not yet visited, in ascending order.
    """
    if not 0 <= vertex_count <= len(adjacency):
        raise IndexError(f"vertex count {vertex_count} exceeds the graph")
    visited = [False] * len(adjacency)
    order: list[int] = []
    for start in range(vertex_count):
        if not visited[start]:
            order.extend(_bfs_from(adjacency, start, visited))
    return order


def dfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in stack-based depth-first order.

    Vertices are marked when pushed, and neighbours are pushed in list order.
    """
    _check_start(adjacency, start)
    visited = [False] * len(adjacency)
    visited[start] = True
    stack = [start]
    order: list[int] = []
    while stack:
        current = stack.pop()
        order.append(current)
        for neighbour in adjacency[current]:
            if not visited[neighbour]:
                visited[neighbour] = True
                stack.append(neighbour)
    return order