"""Colouring, topological orders, bipartiteness and cycle detection."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Sequence
from typing import Any


def greedy_coloring(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Colour vertices in index order with the smallest colour unused by coloured neighbours.

    The result is a valid colouring, not necessarily a minimal one.
    """
    colors = [-1] * len(adjacency)
    for vertex, neighbours in enumerate(adjacency):
        taken = {colors[neighbour] for neighbour in neighbours if colors[neighbour] != -1}
        color = 0
        while color in taken:
            color += 1
        colors[vertex] = color
    return colors


def all_topological_orders(edges: Iterable[Sequence[Any]]) -> list[list[Any]]:
    """Return every topological order of the graph given by ``(from, to)`` edges.

    Vertices are tried in sorted order, so the orders come out in
    lexicographic order. A graph with a cycle has no orders.
    """
    adjacency: dict[Hashable, list[Hashable]] = {}
    indegree: dict[Hashable, int] = {}
    for u, v in edges:
        adjacency.setdefault(u, []).append(v)
        adjacency.setdefault(v, [])
        indegree[v] = indegree.get(v, 0) + 1
        indegree.setdefault(u, 0)
    nodes = sorted(adjacency)
    placed: set[Hashable] = set()
    current: list[Hashable] = []

    def extend() -> Iterator[list[Any]]:
        advanced = False
        for node in nodes:
            if node in placed or indegree[node]:
                continue
            advanced = True
            placed.add(node)
            current.append(node)
            for neighbour in adjacency[node]:
                indegree[neighbour] -= 1
            yield from extend()
            for neighbour in adjacency[node]:
                indegree[neighbour] += 1
            current.pop()
            placed.discard(node)
        if not advanced and len(current) == len(nodes):
            yield list(current)

    return list(extend())


def is_bipartite(adjacency: Sequence[Sequence[int]]) -> bool:
    """Return whether the undirected graph can be two-coloured."""
    colors = [-1] * len(adjacency)
    for start in range(len(adjacency)):
        if colors[start] != -1:
            continue
        colors[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if colors[neighbour] == -1:
                    colors[neighbour] = 1 - colors[node]
                    queue.append(neighbour)
                elif colors[neighbour] == colors[node]:
                    return False
    return True


def _adjacency(vertex_count: int, edges: Iterable[Sequence[int]], directed: bool) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise IndexError(f"edge ({u}, {v}) is out of range")
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def has_directed_cycle(vertex_count: int, edges: Iterable[Sequence[int]]) -> bool:
    """Return whether the directed graph given by ``(u, v)`` edges has a cycle."""
    adjacency = _adjacency(vertex_count, edges, directed=True)
    unvisited, on_stack, done = 0, 1, 2
    state = [unvisited] * vertex_count
    for root in range(vertex_count):
        if state[root] != unvisited:
            continue
        state[root] = on_stack
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if state[neighbour] == on_stack:
                    return True
                if state[neighbour] == unvisited:
                    state[neighbour] = on_stack
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                state[node] = done
                stack.pop()
    return False


def has_undirected_cycle(vertex_count: int, edges: Iterable[Sequence[int]]) -> bool:
    """Return whether the undirected graph has a cycle, found by BFS with parent tracking.

    A self-loop counts as a cycle; a repeated edge to the parent does not.
    """
    adjacency = _adjacency(vertex_count, edges, directed=False)
    visited = [False] * vertex_count
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        queue: deque[tuple[int, int]] = deque([(start, -1)])
        while queue:
            node, parent = queue.popleft()
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append((neighbour, node))
                elif neighbour != parent:
                    return True
    return False


def can_finish(course_count: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Return whether all courses can be taken, i.e. the prerequisites have no cycle."""
    return not has_directed_cycle(course_count, prerequisites)