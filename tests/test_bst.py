import pytest

from dsakit.bst import (
    BinarySearchTree,
    Node,
    is_bst,
    smallest_value,
    sorted_array_to_bst,
)

EXAMPLE = [20, 8, 22, 4, 12, 10, 14]


@pytest.fixture
def tree():
    return BinarySearchTree(EXAMPLE)


def test_inorder_is_sorted_and_deduplicated():
    t = BinarySearchTree([5, 3, 5, 7, 3, 1])
    assert t.inorder() == sorted({5, 3, 7, 1})


def test_duplicates_kept_when_allowed():
    t = BinarySearchTree([5, 3, 5, 7, 3, 1], allow_duplicates=True)
    assert t.inorder() == sorted([5, 3, 5, 7, 3, 1])


def test_duplicate_goes_right():
    t = BinarySearchTree([4, 4], allow_duplicates=True)
    assert t.root.left is None
    assert t.root.right.key == 4


def test_search_and_contains(tree):
    node = tree.search(12)
    assert node.key == 12
    assert {node.left.key, node.right.key} == {10, 14}
    assert tree.search(99) is None
    assert 14 in tree
    assert 15 not in tree


def test_min_max(tree):
    assert tree.minimum() == min(EXAMPLE)
    assert tree.maximum() == max(EXAMPLE)


def test_empty_min_max_raise():
    t = BinarySearchTree()
    with pytest.raises(ValueError):
        t.minimum()
    with pytest.raises(ValueError):
        t.maximum()


def test_height():
    assert BinarySearchTree().height() == -1
    assert BinarySearchTree([1]).height() == 0
    assert BinarySearchTree([1, 2, 3, 4]).height() == 3


def test_traversal_orders(tree):
    pre = tree.preorder()
    post = tree.postorder()
    assert pre[0] == 20
    assert post[-1] == 20
    assert sorted(pre) == tree.inorder()
    assert sorted(post) == tree.inorder()
    assert BinarySearchTree(pre).preorder() == pre


@pytest.mark.parametrize("key", EXAMPLE)
def test_delete_each_key(key):
    t = BinarySearchTree(EXAMPLE)
    assert t.delete(key) is True
    assert key not in t
    assert t.inorder() == sorted(k for k in EXAMPLE if k != key)
    assert is_bst(t.root)


def test_delete_missing_key(tree):
    before = tree.preorder()
    assert tree.delete(99) is False
    assert tree.preorder() == before


def test_delete_until_empty(tree):
    for key in EXAMPLE:
        tree.delete(key)
    assert tree.root is None
    assert tree.inorder() == []


def test_kth_smallest(tree):
    ordered = sorted(EXAMPLE)
    for k in range(1, len(EXAMPLE) + 1):
        assert tree.kth_smallest(k) == ordered[k - 1]


@pytest.mark.parametrize("k", [0, -1, 8])
def test_kth_smallest_out_of_range(tree, k):
    with pytest.raises(IndexError):
        tree.kth_smallest(k)


@pytest.mark.parametrize("low,high", [(7, 15), (0, 100), (21, 21), (30, 40)])
def test_range_sum(tree, low, high):
    assert tree.range_sum(low, high) == sum(k for k in EXAMPLE if low <= k <= high)


def test_lowest_common_ancestor(tree):
    assert tree.lowest_common_ancestor(8, 14).key == 8
    assert tree.lowest_common_ancestor(10, 14).key == 12
    assert tree.lowest_common_ancestor(4, 22).key == 20
    assert BinarySearchTree().lowest_common_ancestor(1, 2) is None


def test_is_bst(tree):
    assert is_bst(tree.root)
    assert is_bst(None)
    bad = Node(10, Node(5, None, Node(12)), Node(15))
    assert not is_bst(bad)
    assert not is_bst(Node(3, Node(3)))


def test_smallest_value():
    t = BinarySearchTree([9, 4, 17, 2, 6])
    assert smallest_value(t.root) == 2
    assert smallest_value(Node(7, None, Node(1))) == 1
    with pytest.raises(ValueError):
        smallest_value(None)


def test_sorted_array_to_bst():
    values = [-10, -3, 0, 5, 9]
    root = sorted_array_to_bst(values)
    assert root.key == 0
    assert is_bst(root)
    t = BinarySearchTree()
    t.root = root
    assert t.inorder() == values
    assert t.height() == 2
    assert sorted_array_to_bst([]) is None


def test_sorted_array_to_bst_balanced():
    values = list(range(31))
    t = BinarySearchTree()
    t.root = sorted_array_to_bst(values)
    assert t.inorder() == values
    assert t.height() == 4