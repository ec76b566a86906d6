"""Binary and n-ary tree traversals, construction and path problems."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Optional

from dsakit.bst import Node


def _inorder_nodes(root: Optional[Node]) -> Iterator[Node]:
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _preorder_nodes(root: Optional[Node]) -> Iterator[Node]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _is_leaf(node: Node) -> bool:
    return node.left is None and node.right is None


def preorder(root: Optional[Node]) -> list[Any]:
    """Return the keys in root, left, right order."""
    return [node.key for node in _preorder_nodes(root)]


def inorder(root: Optional[Node]) -> list[Any]:
    """Return the keys in left, root, right order."""
    return [node.key for node in _inorder_nodes(root)]


def postorder(root: Optional[Node]) -> list[Any]:
    """Return the keys in left, right, root order."""
    keys: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        keys.append(node.key)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    keys.reverse()
    return keys


def level_order(root: Optional[Node]) -> list[Any]:
    """Return the keys level by level, left to right."""
    keys: list[Any] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        keys.append(node.key)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return keys


def build_level_order(values: Iterable[Any]) -> Optional[Node]:
    """Build a tree from keys given level by level; None marks a missing child.

    Each node takes the next two values as its left and right child; once
    the values run out, the remaining children are missing.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = Node(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, None)
        if left is not None:
            node.left = Node(left)
            queue.append(node.left)
        right = next(items, None)
        if right is not None:
            node.right = Node(right)
            queue.append(node.right)
    return root


def complete_tree(values: Iterable[Any]) -> Optional[Node]:
    """Build a complete binary tree by inserting ``values`` in level order."""
    nodes = [Node(value) for value in values]
    for index, node in enumerate(nodes):
        left, right = 2 * index + 1, 2 * index + 2
        if left < len(nodes):
            node.left = nodes[left]
        if right < len(nodes):
            node.right = nodes[right]
    return nodes[0] if nodes else None


def kth_inorder(root: Optional[Node], k: int) -> Any:
    """Return the key of the ``k``-th node (1-based) in inorder; raise IndexError if absent."""
    if k < 1:
        raise IndexError(f"k={k} is out of range")
    node = next(islice(_inorder_nodes(root), k - 1, None), None)
    if node is None:
        raise IndexError(f"tree has fewer than {k} nodes")
    return node.key


def invert_tree(root: Optional[Node]) -> Optional[Node]:
    """Mirror the tree in place and return its root."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return root


def boundary_traversal(root: Optional[Node]) -> list[Any]:
    """Return the anticlockwise boundary: root, left edge, leaves, reversed right edge."""
    if root is None:
        return []
    result = [] if _is_leaf(root) else [root.key]

    node = root.left
    while node is not None:
        if not _is_leaf(node):
            result.append(node.key)
        node = node.left if node.left is not None else node.right

    result.extend(node.key for node in _preorder_nodes(root) if _is_leaf(node))

    right_edge: list[Any] = []
    node = root.right
    while node is not None:
        if not _is_leaf(node):
            right_edge.append(node.key)
        node = node.right if node.right is not None else node.left
    result.extend(reversed(right_edge))
    return result


def count_paths_with_sum(root: Optional[Node], k: Any) -> int:
    """Return how many downward paths have keys summing to ``k``."""
    prefix: Counter = Counter({0: 1})

    def walk(node: Optional[Node], running: Any) -> int:
        if node is None:
            return 0
        running += node.key
        count = prefix[running - k]
        prefix[running] += 1
        count += walk(node.left, running) + walk(node.right, running)
        prefix[running] -= 1
        return count

    return walk(root, 0)


@dataclass(eq=False)
class NaryNode:
    """A tree node with any number of ordered children."""

    value: Any
    children: list["NaryNode"] = field(default_factory=list)


def nary_preorder(root: Optional[NaryNode]) -> list[Any]:
    """Return the values of an n-ary tree in preorder."""
    result: list[Any] = []
    stack: list[NaryNode] = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        stack.extend(reversed(node.children))
    return result