"""Rebuilding binary trees from pairs of traversals."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from enum import Enum
from typing import Optional, Union

from dsakit.bst import Node
from dsakit.tree_traversal import inorder as _inorder
from dsakit.tree_traversal import postorder as _postorder
from dsakit.tree_traversal import preorder as _preorder


class Traversal(str, Enum):
    """The depth-first traversal orders of a binary tree."""

    PREORDER = "preorder"
    INORDER = "inorder"
    POSTORDER = "postorder"


def _index_map(sequence: Sequence[Hashable], inorder: Sequence[Hashable]) -> dict[Hashable, int]:
    if len(sequence) != len(inorder):
        raise ValueError("traversals have different lengths")
    positions = {value: index for index, value in enumerate(inorder)}
    if len(positions) != len(inorder):
        raise ValueError("tree values must be distinct")
    if set(sequence) != positions.keys():
        raise ValueError("traversals do not hold the same values")
    return positions


def build_from_preorder_inorder(
    preorder: Sequence[Hashable], inorder: Sequence[Hashable]
) -> Optional[Node]:
    """Return the root of the tree with the given preorder and inorder traversals."""
    positions = _index_map(preorder, inorder)

    def build(pre_start: int, pre_end: int, in_start: int, in_end: int) -> Optional[Node]:
        if pre_start > pre_end or in_start > in_end:
            return None
        key = preorder[pre_start]
        in_root = positions[key]
        left_size = in_root - in_start
        return Node(
            key,
            build(pre_start + 1, pre_start + left_size, in_start, in_root - 1),
            build(pre_start + left_size + 1, pre_end, in_root + 1, in_end),
        )

    return build(0, len(preorder) - 1, 0, len(inorder) - 1)


def build_from_postorder_inorder(
    postorder: Sequence[Hashable], inorder: Sequence[Hashable]
) -> Optional[Node]:
    """Return the root of the tree with the given postorder and inorder traversals."""
    positions = _index_map(postorder, inorder)

    def build(post_start: int, post_end: int, in_start: int, in_end: int) -> Optional[Node]:
        if post_start > post_end or in_start > in_end:
            return None
        key = postorder[post_end]
        in_root = positions[key]
        left_size = in_root - in_start
        return Node(
            key,
            build(post_start, post_start + left_size - 1, in_start, in_root - 1),
            build(post_start + left_size, post_end - 1, in_root + 1, in_end),
        )

    return build(0, len(postorder) - 1, 0, len(inorder) - 1)


def postorder_from_preorder_inorder(
    preorder: Sequence[Hashable], inorder: Sequence[Hashable]
) -> Union[str, list]:
    """Return the postorder traversal implied by a preorder and an inorder one.

    Two strings give a string; other sequences give a list.
    """
    keys = _postorder(build_from_preorder_inorder(preorder, inorder))
    if isinstance(preorder, str) and isinstance(inorder, str):
        return "".join(keys)
    return keys


_OUTPUTS: dict[Traversal, Callable[[Optional[Node]], list]] = {
    Traversal.PREORDER: _preorder,
    Traversal.INORDER: _inorder,
    Traversal.POSTORDER: _postorder,
}


def _traversal(kind: Union[str, Traversal]) -> Traversal:
    try:
        return Traversal(kind)
    except ValueError:
        raise ValueError(f"invalid traversal type {kind!r}") from None


def convert_traversal(
    kind: Union[str, Traversal],
    sequence: Sequence[Hashable],
    inorder: Sequence[Hashable],
    output_kind: Union[str, Traversal],
) -> list:
    """Rebuild a tree from a ``kind`` traversal plus its inorder one and
    return its ``output_kind`` traversal."""
    source = _traversal(kind)
    target = _traversal(output_kind)
    if source is Traversal.PREORDER:
        root = build_from_preorder_inorder(sequence, inorder)
    elif source is Traversal.POSTORDER:
        root = build_from_postorder_inorder(sequence, inorder)
    else:
        raise ValueError("an inorder traversal alone does not determine the tree")
    return _OUTPUTS[target](root)