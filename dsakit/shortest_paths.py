"""Shortest paths: Dijkstra, Floyd-Warshall and Bellman-Ford."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from math import inf
from typing import Optional


def shortest_path(
    vertex_count: int,
    edges: Iterable[Sequence[int]],
    source: int,
    destination: int,
) -> Optional[tuple[int, list[int]]]:
    """Return ``(distance, path)`` between two vertices of an undirected weighted graph.

    Edges are ``(u, v, weight)`` with non-negative weights. Return None when
    ``destination`` cannot be reached.
    """
    for vertex in (source, destination):
        if not 0 <= vertex < vertex_count:
            raise IndexError(f"vertex {vertex} is out of range")
    graph: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise IndexError(f"edge ({u}, {v}) is out of range")
        graph[u].append((v, weight))
        graph[v].append((u, weight))

    dist: list[float] = [inf] * vertex_count
    parent: list[Optional[int]] = [None] * vertex_count
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if u == destination:
            break
        if d > dist[u]:
            continue
        for v, weight in graph[u]:
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                parent[v] = u
                heapq.heappush(heap, (dist[v], v))

    if dist[destination] == inf:
        return None
    path = [destination]
    while path[-1] != source:
        previous = parent[path[-1]]
        assert previous is not None
        path.append(previous)
    path.reverse()
    return int(dist[destination]), path


def network_delay_time(times: Iterable[Sequence[int]], node_count: int, source: int) -> int:
    """Return the time for a signal from ``source`` to reach all nodes ``1 .. node_count``.

    Edges are directed ``(u, v, weight)``. Return -1 if some node is unreachable.
    """
    if not 1 <= source <= node_count:
        raise IndexError(f"source {source} is out of range")
    graph: list[list[tuple[int, int]]] = [[] for _ in range(node_count + 1)]
    for u, v, weight in times:
        if not (1 <= u <= node_count and 1 <= v <= node_count):
            raise IndexError(f"edge ({u}, {v}) is out of range")
        graph[u].append((v, weight))

    dist: list[float] = [inf] * (node_count + 1)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for nxt, weight in graph[node]:
            if dist[node] + weight < dist[nxt]:
                dist[nxt] = dist[node] + weight
                heapq.heappush(heap, (dist[nxt], nxt))

    reached = dist[1:]
    if any(d == inf for d in reached):
        return -1
    return int(max(reached, default=0))


def find_city(node_count: int, edges: Iterable[Sequence[int]], threshold: int) -> int:
    """Return the city reaching the fewest others within ``threshold``.

    Edges are undirected ``(u, v, weight)``; a later edge between the same
    pair replaces an earlier one. Ties go to the city with the larger index.
    Return -1 when there are no cities.
    """
    dist = [[inf] * node_count for _ in range(node_count)]
    for i in range(node_count):
        dist[i][i] = 0
    for u, v, weight in edges:
        if not (0 <= u < node_count and 0 <= v < node_count):
            raise IndexError(f"edge ({u}, {v}) is out of range")
        dist[u][v] = weight
        dist[v][u] = weight

    for k in range(node_count):
        row_k = dist[k]
        for row in dist:
            via = row[k]
            if via == inf:
                continue
            for j, tail in enumerate(row_k):
                if via + tail < row[j]:
                    row[j] = via + tail

    best_city, best_count = -1, inf
    for city, row in enumerate(dist):
        count = sum(1 for other, d in enumerate(row) if other != city and d <= threshold)
        if count <= best_count:
            best_city, best_count = city, count
    return best_city


def has_negative_cycle(node_count: int, edges: Iterable[Sequence[int]]) -> bool:
    """Return whether the directed graph of ``(u, v, weight)`` edges has a negative cycle."""
    edge_list = [tuple(edge) for edge in edges]
    for u, v, _ in edge_list:
        if not (0 <= u < node_count and 0 <= v < node_count):
            raise IndexError(f"edge ({u}, {v}) is out of range")
    dist = [0] * node_count
    for _ in range(node_count - 1):
        for u, v, weight in edge_list:
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return any(dist[u] + weight < dist[v] for u, v, weight in edge_list)