"""Unit tests for the ordered BinarySearchTree."""

import logging
from dataclasses import dataclass

import pytest

from ordered_tree import BinarySearchTree, InvalidArgumentError, SearchTreeNode

BALANCED = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def balanced():
    """Create the seven-node perfectly balanced tree."""
    return BinarySearchTree(BALANCED)


def _snapshot(tree):
    """Preorder (value, height) pairs with None markers for absent children."""
    shape = []
    stack = [tree.root]
    while stack:
        node = stack.pop()
        if node is None:
            shape.append(None)
            continue
        shape.append((node.value, node.height))
        stack.append(node.right)
        stack.append(node.left)
    return shape


# -------------------------------
# Balanced insertion order
# -------------------------------
def test_balanced_in_order(balanced):
    assert balanced.in_order() == [20, 30, 40, 50, 60, 70, 80]
    assert list(balanced) == [20, 30, 40, 50, 60, 70, 80]


def test_balanced_heights(balanced):
    assert balanced.height() == 3
    assert balanced.height(50) == 3
    assert balanced.height(30) == 2
    assert balanced.height(80) == 1


def test_balanced_queries(balanced):
    assert balanced.is_bst() is True
    assert balanced.is_avl() is True
    assert balanced.find_skew_2l_nodes() == []
    assert balanced.sum_depths() == 17


def test_balanced_traversal_orders(balanced):
    assert balanced.pre_order() == [50, 30, 20, 40, 70, 60, 80]
    assert balanced.post_order() == [20, 40, 30, 60, 80, 70, 50]
    assert balanced.bfs() == [50, 30, 70, 20, 40, 60, 80]


# -------------------------------
# Skewing the left side
# -------------------------------
def test_skew_by_one_leaf_stays_avl(balanced):
    balanced.add(10)

    assert balanced.in_order() == [10, 20, 30, 40, 50, 60, 70, 80]
    assert balanced.is_bst() is True
    assert balanced.is_avl() is True
    assert balanced.balance(20) == 1
    assert balanced.balance(30) == 1
    assert balanced.balance(50) == 1
    assert balanced.sum_depths() == 21


def test_skew_to_plus_two(balanced):
    balanced.add(10)
    balanced.add(5)

    assert balanced.is_bst() is True
    assert balanced.is_avl() is False
    # every node on the path 50 -> 30 -> 20 now leans exactly two to the left
    assert balanced.balance(20) == 2
    assert balanced.balance(30) == 2
    assert balanced.balance(50) == 2
    assert balanced.find_skew_2l_nodes() == [50, 30, 20]


def test_skew_2l_ignores_larger_balances():
    tree = BinarySearchTree([5, 4, 3, 2, 1])

    assert tree.balance(5) == 4
    assert tree.balance(4) == 3
    assert tree.balance(3) == 2
    assert tree.find_skew_2l_nodes() == [3]


def test_skew_2l_ignores_right_leaning_nodes():
    tree = BinarySearchTree([1, 2, 3])

    assert tree.balance(1) == -2
    assert tree.find_skew_2l_nodes() == []
    assert tree.is_avl() is False


# -------------------------------
# Duplicates and None
# -------------------------------
def test_duplicates_are_absorbed():
    tree = BinarySearchTree[int]()
    for _ in range(3):
        tree.add(10)

    assert tree.in_order() == [10]
    assert tree.height() == 1
    assert tree.sum_depths() == 1
    assert len(tree) == 1


def test_duplicate_insert_leaves_shape_unchanged(balanced):
    balanced.add(10)
    before = _snapshot(balanced)

    balanced.add(30)
    balanced.add(10)

    assert _snapshot(balanced) == before
    assert len(balanced) == 8


def test_add_none_raises_and_leaves_tree_unchanged(balanced):
    before = _snapshot(balanced)

    with pytest.raises(InvalidArgumentError):
        balanced.add(None)

    assert _snapshot(balanced) == before
    assert len(balanced) == 7


def test_add_none_on_empty_tree():
    tree = BinarySearchTree[int]()
    with pytest.raises(ValueError):
        tree.insert(None)
    assert tree.is_empty()


# -------------------------------
# Degenerate chains
# -------------------------------
def test_left_linear_chain():
    tree = BinarySearchTree([5, 4, 3, 2, 1])

    assert tree.in_order() == [1, 2, 3, 4, 5]
    assert tree.height() == 5
    assert tree.is_bst() is True
    assert tree.is_avl() is False
    assert tree.sum_depths() == 15


def test_long_chain_does_not_recurse():
    n = 2000
    tree = BinarySearchTree(range(n, 0, -1))

    assert tree.height() == n
    assert tree.in_order() == list(range(1, n + 1))
    assert tree.sum_depths() == n * (n + 1) // 2
    assert tree.is_bst() is True
    assert tree.is_avl() is False
    assert tree.find_skew_2l_nodes() == [3]


# -------------------------------
# Empty tree
# -------------------------------
def test_empty_tree():
    tree = BinarySearchTree[int]()

    assert tree.in_order() == []
    assert tree.sum_depths() == 0
    assert tree.is_bst() is True
    assert tree.is_avl() is True
    assert tree.find_skew_2l_nodes() == []
    assert tree.height() == 0
    assert tree.find_min() is None
    assert tree.find_max() is None
    assert tree.pretty_print() == "<empty>"


# -------------------------------
# Validators on hand-built trees
# -------------------------------
def test_is_bst_detects_value_deep_in_wrong_subtree(balanced):
    # 55 is greater than 50 but sits in the root's left subtree
    balanced.root.left.right.right = SearchTreeNode(55)
    assert balanced.is_bst() is False
    assert balanced.is_avl() is False


def test_is_bst_rejects_equal_values(balanced):
    balanced.root.right.left = SearchTreeNode(50)
    assert balanced.is_bst() is False


def test_is_avl_requires_bst_even_when_balanced(balanced):
    balanced.root.left.left = SearchTreeNode(45)
    assert balanced.is_avl() is False


# -------------------------------
# Search helpers
# -------------------------------
def test_contains_and_extremes(balanced):
    assert 40 in balanced
    assert balanced.contains(80)
    assert not balanced.contains(45)
    assert balanced.find_min() == 20
    assert balanced.find_max() == 80


def test_height_and_balance_of_absent_value(balanced):
    assert balanced.height(45) == 0
    assert balanced.balance(45) == 0


def test_strings_are_ordered():
    tree = BinarySearchTree(["m", "c", "x", "a", "c"])
    assert tree.in_order() == ["a", "c", "m", "x"]
    assert tree.is_avl() is True


@dataclass(eq=False)
class Version:
    """Only defines __lt__; equality comes from the ordering."""

    major: int
    label: str

    def __lt__(self, other):
        return self.major < other.major


def test_equality_derived_from_ordering():
    tree = BinarySearchTree([Version(2, "b"), Version(1, "a"), Version(2, "again")])

    assert [v.label for v in tree.in_order()] == ["a", "b"]
    assert Version(2, "other") in tree
    assert tree.is_bst() is True


def test_repr_and_pretty_print():
    tree = BinarySearchTree([2, 1, 3])
    assert repr(tree) == "BinarySearchTree([1, 2, 3])"
    assert tree.pretty_print() == "    └ 3\n└ 2\n    └ 1"


def test_insert_and_duplicate_are_logged(caplog):
    tree = BinarySearchTree[int]()
    with caplog.at_level(logging.DEBUG, logger="ordered_tree.core.search_tree"):
        tree.add(10)
        tree.add(5)
        tree.add(10)

    messages = [record.getMessage() for record in caplog.records]
    assert "Inserted 10 as root" in messages
    assert "Inserted 5 at depth 2" in messages
    assert "Ignoring duplicate value 10" in messages
