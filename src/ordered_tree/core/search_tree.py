"""
An ordered binary search tree with cached subtree heights.

Time Complexity:
Insert/Search: O(h), where h is the height of the tree (O(n) worst case, since
               the tree is never rebalanced)
Queries (depth sum, 2L nodes, BST/AVL validation): O(n)

Every walk uses an explicit stack, so a degenerate chain of any length can be
inserted and analysed without reaching the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from .binary_tree import BinaryTree
from .nodes import SearchTreeNode, balance_factor, node_height, update_height
from .types import E, compare

logger = logging.getLogger(__name__)


class BinarySearchTree(BinaryTree[E]):
    """
    Binary search tree derived from BinaryTree.

    Invariants:
        - every value in a left subtree is strictly less than its ancestor
        - every value in a right subtree is strictly greater than its ancestor
        - no two nodes hold equal values
        - each node caches 1 + max(left height, right height)

    Insertion never rotates, so the AVL balance condition is only checked by
    is_avl(), never enforced.
    """

    __slots__ = ()

    _root: Optional[SearchTreeNode[E]]

    # -------------------------------
    # Insert override for BST
    # -------------------------------
    def add(self, value: E) -> None:
        """
        Insert a value into the tree (BST style), ignoring duplicates.
        Raises InvalidArgumentError if value is None.
        """
        self._check_value(value)
        if self._root is None:
            self._root = SearchTreeNode(value)
            self._size = 1
            logger.debug(f"Inserted {value!r} as root")
            return

        path: List[SearchTreeNode[E]] = []
        node = self._root
        while True:
            order = compare(value, node.value)
            if order == 0:
                # equal value already stored: heights must stay untouched
                logger.debug(f"Ignoring duplicate value {value!r}")
                return
            path.append(node)
            child = node.left if order < 0 else node.right
            if child is None:
                break
            node = child

        leaf = SearchTreeNode(value)
        if order < 0:
            node.left = leaf
        else:
            node.right = leaf
        self._size += 1

        for ancestor in reversed(path):
            update_height(ancestor)
        logger.debug(f"Inserted {value!r} at depth {len(path) + 1}")

    def insert(self, value: E) -> None:
        """Alias of add(), so that build_tree() inserts in BST order."""
        self.add(value)

    # -------------------------------
    # Search
    # -------------------------------
    def _find_node(self, value: Optional[E]) -> Optional[SearchTreeNode[E]]:
        if value is None:
            return None
        node = self._root
        while node is not None:
            order = compare(value, node.value)
            if order < 0:
                node = node.left
            elif order > 0:
                node = node.right
            else:
                return node
        return None

    def contains(self, value: E) -> bool:
        """
        Checks whether an equal value is stored
        Time Complexity: O(h) since only one root-to-leaf path is followed
        """
        return self._find_node(value) is not None

    def find_max(self) -> Optional[E]:
        """
        Finds the maximum value in the binary search tree
        Time Complexity: Avg. O(logn) since DFS is used to traverse each level to the max value
                         O(n) worst case for an unbalanced BST
        """
        node = self._root
        if node is None:
            return None
        while node.right:
            node = node.right
        return node.value

    def find_min(self) -> Optional[E]:
        """
        Finds the minimum value in the binary search tree
        Time Complexity: Avg. O(logn) since DFS is used to traverse each level to the min value
                         O(n) worst case for an unbalanced BST
        """
        node = self._root
        if node is None:
            return None
        while node.left:
            node = node.left
        return node.value

    # -------------------------------
    # Heights
    # -------------------------------
    def height(self, value: Optional[E] = None) -> int:
        """
        Returns the cached height of the whole tree, or of the subtree rooted
        at the node holding `value`. Absent subtrees have height 0.
        Time Complexity: O(1) for the whole tree, O(h) for a given value
        """
        if value is None:
            return node_height(self._root)
        return node_height(self._find_node(value))

    def balance(self, value: E) -> int:
        """Balance factor (left height - right height) of the node holding `value`, or 0."""
        return balance_factor(self._find_node(value))

    # -------------------------------
    # Traversals
    # -------------------------------
    def in_order(self) -> List[E]:
        """Return every stored value in strictly ascending order."""
        return self.to_list()

    def __iter__(self) -> Iterator[E]:
        for node in self._iter_inorder():
            yield node.value

    # -------------------------------
    # Analytical queries
    # -------------------------------
    def sum_depths(self) -> int:
        """
        Sums the depth of every node, where the root has depth 1
        Time Complexity: O(n) since every node is visited once (preorder)
        Space Complexity: O(h) for the stack of (node, depth) pairs
        """
        total = 0
        if self._root is None:
            return total
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            total += depth
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))
        return total

    def find_skew_2l_nodes(self) -> List[E]:
        """
        Returns, in preorder, the values of the nodes whose balance factor is
        exactly +2 (left subtree two levels taller than the right one).
        A node with balance +3 or more is not a 2L node.
        """
        return [
            node.value
            for node in self._iter_preorder()
            if balance_factor(node) == 2
        ]

    def is_bst(self) -> bool:
        """
        Checks the BST property for every node by carrying an open interval
        (low, high) down the tree; None stands for an unbounded side.
        Equal values anywhere in a subtree disqualify the tree.
        """
        if self._root is None:
            return True
        stack: List[tuple[SearchTreeNode[E], Optional[E], Optional[E]]] = [
            (self._root, None, None)
        ]
        while stack:
            node, low, high = stack.pop()
            if low is not None and not low < node.value:
                return False
            if high is not None and not node.value < high:
                return False
            if node.left is not None:
                stack.append((node.left, low, node.value))
            if node.right is not None:
                stack.append((node.right, node.value, high))
        return True

    def is_avl(self) -> bool:
        """
        Checks that the tree is a valid BST whose every node has a balance
        factor of -1, 0 or +1, using the cached heights.
        """
        if not self.is_bst():
            return False
        for node in self._iter_preorder():
            if abs(balance_factor(node)) > 1:
                logger.debug(f"Node {node.value!r} is out of AVL balance")
                return False
        return True
