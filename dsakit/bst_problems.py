"""Problems on binary search trees: distance sums, repair and largest valid subtree."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from dsakit.bst import Node


def _inorder(root: Optional[Node]) -> Iterator[Node]:
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _find_path(root: Optional[Node], target: Any) -> Optional[list[Node]]:
    """Return the nodes from the root to the first node holding ``target`` in preorder."""
    parents: dict[Node, Optional[Node]] = {}
    stack: list[tuple[Node, Optional[Node]]] = [(root, None)] if root is not None else []
    while stack:
        node, parent = stack.pop()
        parents[node] = parent
        if node.key == target:
            path: list[Node] = []
            current: Optional[Node] = node
            while current is not None:
                path.append(current)
                current = parents[current]
            path.reverse()
            return path
        if node.right is not None:
            stack.append((node.right, node))
        if node.left is not None:
            stack.append((node.left, node))
    return None


def _sum_at_depth(node: Optional[Node], depth: int) -> Any:
    if node is None or depth < 0:
        return 0
    level = [node]
    for _ in range(depth):
        level = [
            child
            for current in level
            for child in (current.left, current.right)
            if child is not None
        ]
    return sum(current.key for current in level)


def distance_k_sum(root: Optional[Node], target: Any, k: int) -> Any:
    """Return the sum of keys of nodes exactly ``k`` edges from the node holding ``target``.

    Raise ValueError if no node holds ``target``.
    """
    path = _find_path(root, target)
    if path is None:
        raise ValueError(f"target {target!r} not found in the tree")
    total = 0
    block: Optional[Node] = None
    for distance, node in enumerate(reversed(path)):
        if distance > k:
            break
        if distance == k:
            total += node.key
        else:
            for child in (node.left, node.right):
                if child is not block:
                    total += _sum_at_depth(child, k - distance - 1)
        block = node
    return total


def recover_tree(root: Optional[Node]) -> None:
    """Swap back, in place, the keys of two nodes exchanged by mistake in a BST."""
    first: Optional[Node] = None
    middle: Optional[Node] = None
    last: Optional[Node] = None
    prev: Optional[Node] = None
    for node in _inorder(root):
        if prev is not None and node.key < prev.key:
            if first is None:
                first, middle = prev, node
            else:
                last = node
        prev = node
    if first is not None and last is not None:
        first.key, last.key = last.key, first.key
    elif first is not None and middle is not None:
        first.key, middle.key = middle.key, first.key


def largest_bst_subtree(root: Optional[Node]) -> int:
    """Return the number of nodes in the largest subtree that is a valid BST."""
    best = 0

    def inspect(node: Optional[Node]) -> tuple[bool, int, Any, Any]:
        nonlocal best
        if node is None:
            return True, 0, None, None
        left_ok, left_size, left_min, left_max = inspect(node.left)
        right_ok, right_size, right_min, right_max = inspect(node.right)
        if (
            left_ok
            and right_ok
            and (left_max is None or node.key > left_max)
            and (right_min is None or node.key < right_min)
        ):
            size = left_size + right_size + 1
            best = max(best, size)
            low = node.key if left_min is None else left_min
            high = node.key if right_max is None else right_max
            return True, size, low, high
        return False, 0, None, None

    inspect(root)
    return best