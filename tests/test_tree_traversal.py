import pytest

from dsakit.bst import BinarySearchTree, Node
from dsakit.tree_traversal import (
    NaryNode,
    boundary_traversal,
    build_level_order,
    complete_tree,
    count_paths_with_sum,
    inorder,
    invert_tree,
    kth_inorder,
    level_order,
    nary_preorder,
    postorder,
    preorder,
)

KEYS = [20, 8, 22, 4, 12, 10, 14]


def _tree():
    return BinarySearchTree(KEYS)


def test_traversals_agree_with_bst():
    tree = _tree()
    assert preorder(tree.root) == tree.preorder()
    assert inorder(tree.root) == tree.inorder()
    assert postorder(tree.root) == tree.postorder()


def test_inorder_of_bst_is_sorted():
    assert inorder(_tree().root) == sorted(KEYS)


def test_empty_traversals():
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []
    assert level_order(None) == []


def test_complete_tree_round_trip():
    values = list(range(1, 8))
    assert level_order(complete_tree(values)) == values


def test_complete_tree_empty():
    assert complete_tree([]) is None


def test_build_level_order_structure():
    root = build_level_order(["A", "B", "C", None, "D"])
    assert root.key == "A"
    assert root.left.key == "B"
    assert root.left.left is None
    assert root.left.right.key == "D"
    assert level_order(root) == ["A", "B", "C", "D"]


def test_build_level_order_empty_root():
    assert build_level_order([None, "A"]) is None


def test_kth_inorder_matches_inorder():
    root = _tree().root
    ordered = inorder(root)
    for k in range(1, len(ordered) + 1):
        assert kth_inorder(root, k) == ordered[k - 1]


@pytest.mark.parametrize("k", [0, len(KEYS) + 1])
def test_kth_inorder_out_of_range(k):
    with pytest.raises(IndexError):
        kth_inorder(_tree().root, k)


def test_invert_reverses_inorder():
    root = _tree().root
    before = inorder(root)
    assert inorder(invert_tree(root)) == before[::-1]


def test_invert_twice_restores():
    root = complete_tree(range(1, 8))
    before = level_order(root)
    invert_tree(invert_tree(root))
    assert level_order(root) == before


def test_invert_empty():
    assert invert_tree(None) is None


def test_boundary_example():
    root = Node(1, Node(2, Node(4), Node(5, Node(8), Node(9))), Node(3, Node(6), Node(7)))
    assert boundary_traversal(root) == [1, 2, 4, 8, 9, 6, 7, 3]


def test_boundary_single_and_empty():
    assert boundary_traversal(Node(5)) == [5]
    assert boundary_traversal(None) == []


def test_count_paths_small():
    root = Node(1, Node(2), Node(3))
    assert count_paths_with_sum(root, 3) == 2


def test_count_paths_larger():
    root = Node(
        10,
        Node(5, Node(3, Node(3), Node(-2)), Node(2, None, Node(1))),
        Node(-3, None, Node(11)),
    )
    assert count_paths_with_sum(root, 8) == 3


def test_count_paths_none_match():
    assert count_paths_with_sum(Node(1, Node(2), Node(3)), 100) == 0


def test_nary_preorder():
    root = NaryNode(1, [NaryNode(2, [NaryNode(3), NaryNode(4)]), NaryNode(5), NaryNode(6)])
    assert nary_preorder(root) == [1, 2, 3, 4, 5, 6]


def test_nary_preorder_empty():
    assert nary_preorder(None) == []