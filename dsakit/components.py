"""Disjoint-set union and problems solved with connected components."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class DisjointSet:
    """Union-find over the integers ``0 .. size - 1`` with path compression."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is out of range")
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets holding ``x`` and ``y``; return False if already joined."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] < self._rank[root_y]:
            root_x, root_y = root_y, root_x
        self._parent[root_y] = root_x
        if self._rank[root_x] == self._rank[root_y]:
            self._rank[root_x] += 1
        return True

    def component_count(self) -> int:
        """Return the number of disjoint sets."""
        return sum(1 for element in range(len(self._parent)) if self.find(element) == element)


def merge_accounts(accounts: Iterable[Sequence[str]]) -> list[list[str]]:
    """Merge accounts that share an e-mail address.

    Each account is ``[name, email, ...]``. Each result is the name followed
    by the sorted addresses of one merged group; the name is the one last
    recorded for the group's smallest address. Groups appear in the order
    their first address was seen.
    """
    rows = [list(account) for account in accounts]
    email_ids: dict[str, int] = {}
    email_names: dict[str, str] = {}
    for name, *emails in rows:
        for email in emails:
            email_ids.setdefault(email, len(email_ids))
            email_names[email] = name

    sets = DisjointSet(len(email_ids))
    for _, *emails in rows:
        if emails:
            first = email_ids[emails[0]]
            for email in emails[1:]:
                sets.union(first, email_ids[email])

    groups: dict[int, list[str]] = {}
    for email, ident in email_ids.items():
        groups.setdefault(sets.find(ident), []).append(email)

    merged: list[list[str]] = []
    for emails in groups.values():
        emails.sort()
        merged.append([email_names[emails[0]], *emails])
    return merged


def count_complete_components(node_count: int, edges: Iterable[Sequence[int]]) -> int:
    """Return how many connected components are complete graphs."""
    adjacency: list[list[int]] = [[] for _ in range(node_count)]
    for u, v in edges:
        if not (0 <= u < node_count and 0 <= v < node_count):
            raise IndexError(f"edge ({u}, {v}) is out of range")
        adjacency[u].append(v)
        adjacency[v].append(u)

    visited = [False] * node_count
    complete = 0
    for start in range(node_count):
        if visited[start]:
            continue
        visited[start] = True
        component = []
        stack = [start]
        while stack:
            node = stack.pop()
            component.append(node)
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
        if all(len(adjacency[node]) == len(component) - 1 for node in component):
            complete += 1
    return complete