"""Binary search tree with the usual operations and a few tree utilities."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import islice
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding ``key`` and two optional children."""

    key: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


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


def _postorder_keys(root: Optional[Node]) -> list[Any]:
    # Root, right, left visited in order, then reversed, gives left, right, root.
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


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


class BinarySearchTree:
    """A binary search tree of comparable keys.

    By default equal keys are ignored on insertion; with
    ``allow_duplicates`` they are stored in the right subtree.
    """

    def __init__(self, keys: Iterable[Any] = (), allow_duplicates: bool = False) -> None:
        self.root: Optional[Node] = None
        self.allow_duplicates = allow_duplicates
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Insert ``key`` into the tree."""
        if self.root is None:
            self.root = Node(key)
            return
        node = self.root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = Node(key)
                    return
                node = node.left
            elif key > node.key or self.allow_duplicates:
                if node.right is None:
                    node.right = Node(key)
                    return
                node = node.right
            else:
                return

    def delete(self, key: Any) -> bool:
        """Remove one node holding ``key``; return whether one was found."""
        found = False

        def remove(node: Optional[Node], target: Any) -> Optional[Node]:
            nonlocal found
            if node is None:
                return None
            if target < node.key:
                node.left = remove(node.left, target)
            elif target > node.key:
                node.right = remove(node.right, target)
            else:
                found = True
                if node.left is None:
                    return node.right
                if node.right is None:
                    return node.left
                successor = _leftmost(node.right)
                node.key = successor.key
                node.right = remove(node.right, successor.key)
            return node

        self.root = remove(self.root, key)
        return found

    def search(self, key: Any) -> Optional[Node]:
        """Return the first node on the search path holding ``key``, or None."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def minimum(self) -> Any:
        """Return the smallest key; raise ValueError if the tree is empty."""
        if self.root is None:
            raise ValueError("tree is empty")
        return _leftmost(self.root).key

    def maximum(self) -> Any:
        """Return the largest key; raise ValueError if the tree is empty."""
        if self.root is None:
            raise ValueError("tree is empty")
        return _rightmost(self.root).key

    def height(self) -> int:
        """Return the height in edges; an empty tree has height -1."""
        height = -1
        level = [self.root] if self.root is not None else []
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def inorder(self) -> list[Any]:
        """Return the keys in left, root, right order."""
        return [node.key for node in _inorder_nodes(self.root)]

    def preorder(self) -> list[Any]:
        """Return the keys in root, left, right order."""
        return [node.key for node in _preorder_nodes(self.root)]

    def postorder(self) -> list[Any]:
        """Return the keys in left, right, root order."""
        return _postorder_keys(self.root)

    def kth_smallest(self, k: int) -> Any:
        """Return the ``k``-th smallest key (1-based); raise IndexError if out of range."""
        if k < 1:
            raise IndexError(f"k={k} is out of range")
        node = next(islice(_inorder_nodes(self.root), k - 1, None), None)
        if node is None:
            raise IndexError(f"k={k} is out of range")
        return node.key

    def range_sum(self, low: Any, high: Any) -> Any:
        """Return the sum of keys between ``low`` and ``high`` inclusive."""
        total = 0
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            if node.key < low:
                nexts = (node.right,)
            elif node.key > high:
                nexts = (node.left,)
            else:
                total += node.key
                nexts = (node.left, node.right)
            stack.extend(child for child in nexts if child is not None)
        return total

    def lowest_common_ancestor(self, p: Any, q: Any) -> Optional[Node]:
        """Return the node where the search paths for ``p`` and ``q`` split.

        Presence of ``p`` and ``q`` is not checked; None is returned only
        for an empty tree.
        """
        node = self.root
        while node is not None:
            if p < node.key and q < node.key:
                node = node.left
            elif p > node.key and q > node.key:
                node = node.right
            else:
                return node
        return None


def is_bst(root: Optional[Node]) -> bool:
    """Return whether every key lies strictly between its ancestors' bounds."""
    stack: list[tuple[Node, Any, Any]] = [(root, None, None)] if root is not None else []
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.key <= low) or (high is not None and node.key >= high):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.key))
        if node.right is not None:
            stack.append((node.right, node.key, high))
    return True


def smallest_value(root: Optional[Node]) -> Any:
    """Return the smallest key anywhere in the tree; raise ValueError if empty."""
    if root is None:
        raise ValueError("tree is empty")
    return min(node.key for node in _inorder_nodes(root))


def sorted_array_to_bst(values: Sequence[Any]) -> Optional[Node]:
    """Build a height-balanced tree from ascending ``values``; return its root."""

    def build(left: int, right: int) -> Optional[Node]:
        if left > right:
            return None
        mid = left + (right - left) // 2
        return Node(values[mid], build(left, mid - 1), build(mid + 1, right))

    return build(0, len(values) - 1)