"""Reachability questions on small graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def valid_path(
    node_count: int, edges: Iterable[Sequence[int]], source: int, destination: int
) -> bool:
    """Return whether ``destination`` can be reached from ``source`` in an undirected graph."""
    for vertex in (source, destination):
        if not 0 <= vertex < node_count:
            raise IndexError(f"vertex {vertex} is out of range")
    if source == destination:
        return True
    adjacency: list[list[int]] = [[] for _ in range(node_count)]
    for u, v in edges:
        if not (0 <= u < node_count and 0 <= v < node_count):
            raise IndexError(f"edge ({u}, {v}) is out of range")
        adjacency[u].append(v)
        adjacency[v].append(u)
    visited = [False] * node_count
    visited[source] = True
    queue = deque([source])
    while queue:
        current = queue.popleft()
        if current == destination:
            return True
        for neighbour in adjacency[current]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return False


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Return whether every room is reachable from room 0 using the keys found inside."""
    if not rooms:
        return True
    visited = [False] * len(rooms)
    visited[0] = True
    queue = deque([0])
    while queue:
        room = queue.popleft()
        for key in rooms[room]:
            if not 0 <= key < len(rooms):
                raise IndexError(f"key {key} opens no room")
            if not visited[key]:
                visited[key] = True
                queue.append(key)
    return all(visited)


def find_judge(people: int, trust: Iterable[Sequence[int]]) -> int:
    """Return the person (1-based) trusted by all others who trusts nobody, or -1."""
    balance = [0] * (people + 1)
    for truster, trusted in trust:
        if not (1 <= truster <= people and 1 <= trusted <= people):
            raise IndexError(f"trust ({truster}, {trusted}) is out of range")
        balance[truster] -= 1
        balance[trusted] += 1
    return next(
        (person for person in range(1, people + 1) if balance[person] == people - 1),
        -1,
    )