"""
An unsorted binary tree that fills itself level by level.

Values go into the first empty child slot found in breadth-first order, so
the tree is always complete and its height grows as O(logn). Values are never
compared on insert and duplicates are kept, so the breadth-first output is
simply the insertion order: inserting 50, 70, 30 prints "50 70 30", not the
"50 30 70" a comparison-placed tree would give. It is also the
base class for the ordered BinarySearchTree, which reuses the traversal,
rendering and sizing helpers defined here.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, Generic, Iterable, Iterator, List, Optional

from .errors import InvalidArgumentError
from .nodes import BinaryTreeNode
from .types import T

logger = logging.getLogger(__name__)


class BinaryTree(Generic[T]):
    """Binary tree wrapper class."""

    __slots__ = ("_root", "_size")

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[BinaryTreeNode[T]] = None
        self._size = 0
        if values is not None:
            self.build_tree(values)

    @property
    def root(self) -> Optional[BinaryTreeNode[T]]:
        return self._root

    @property
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    @staticmethod
    def _check_value(value: Optional[T]) -> None:
        if value is None:
            raise InvalidArgumentError("Cannot insert None into the tree")

    # -------------------------------
    # Insert (generic: first empty spot)
    # -------------------------------
    def insert(self, value: T) -> None:
        """Insert value anywhere in the tree (first empty spot found)."""
        self._check_value(value)
        new_node = BinaryTreeNode(value)
        if self._root is None:
            self._root = new_node
            self._size = 1
            return

        queue: Deque[BinaryTreeNode[T]] = deque([self._root])
        while queue:
            node = queue.popleft()
            if node.left is None:
                node.left = new_node
                self._size += 1
                return
            queue.append(node.left)
            if node.right is None:
                node.right = new_node
                self._size += 1
                return
            queue.append(node.right)

    def build_tree(self, values: Iterable[T]) -> None:
        """Insert every value of an iterable, in order."""
        before = self._size
        for value in values:
            self.insert(value)
        logger.debug(
            f"{type(self).__name__} gained {self._size - before} nodes (size={self._size})"
        )

    # -------------------------------
    # Search
    # -------------------------------
    def contains(self, value: T) -> bool:
        """
        Checks whether any node stores a value equal to `value`
        Time Complexity: O(n) since the tree is unsorted and every node may need a visit
        """
        for node in self._iter_bfs():
            if node.value == value:
                return True
        return False

    # -------------------------------
    # Traversals
    # -------------------------------
    def _iter_bfs(self) -> Iterator[BinaryTreeNode[T]]:
        if self._root is None:
            return
        queue: Deque[BinaryTreeNode[T]] = deque([self._root])
        while queue:
            node = queue.popleft()
            yield node
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def _iter_inorder(self) -> Iterator[BinaryTreeNode[T]]:
        stack: List[BinaryTreeNode[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _iter_preorder(self) -> Iterator[BinaryTreeNode[T]]:
        if self._root is None:
            return
        stack: List[BinaryTreeNode[T]] = [self._root]
        while stack:
            node = stack.pop()
            yield node
            # right is pushed first so that left is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _iter_postorder(self) -> Iterator[BinaryTreeNode[T]]:
        if self._root is None:
            return
        stack: List[BinaryTreeNode[T]] = [self._root]
        reversed_nodes: List[BinaryTreeNode[T]] = []
        while stack:
            node = stack.pop()
            reversed_nodes.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_nodes)

    def inorder(self, visit: Callable[[T], None]) -> None:
        for node in self._iter_inorder():
            visit(node.value)

    def preorder(self, visit: Callable[[T], None]) -> None:
        for node in self._iter_preorder():
            visit(node.value)

    def postorder(self, visit: Callable[[T], None]) -> None:
        for node in self._iter_postorder():
            visit(node.value)

    def bfs(self) -> List[T]:
        """Return all values in breadth-first (level) order."""
        return [node.value for node in self._iter_bfs()]

    def bfs_string(self) -> str:
        """Breadth-first values joined by single spaces; empty string for an empty tree."""
        return " ".join(str(value) for value in self.bfs())

    # -------------------------------
    # Utility
    # -------------------------------
    def to_list(self) -> List[T]:
        """Return all values of the tree in inorder as a list."""
        values: List[T] = []
        self.inorder(values.append)
        return values

    def pre_order(self) -> List[T]:
        values: List[T] = []
        self.preorder(values.append)
        return values

    def post_order(self) -> List[T]:
        values: List[T] = []
        self.postorder(values.append)
        return values

    def height(self) -> int:
        """
        Returns the number of nodes on the longest root-to-leaf path
        Time Complexity: O(n) since all nodes must be traversed to find the largest height
        Space Complexity: O(n) for the explicit stack of (node, depth) pairs
        """
        max_height = 0
        if self._root is None:
            return max_height
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            if depth > max_height:
                max_height = depth
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return max_height

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()})"

    def pretty_print(self, indent: int = 4) -> str:
        """
        Renders the tree sideways: the right subtree above its parent and the
        left subtree below, each level indented by `indent` spaces.
        """
        if self._root is None:
            return "<empty>"

        lines: List[str] = []
        stack: List[tuple[BinaryTreeNode[T], int]] = []
        node: Optional[BinaryTreeNode[T]] = self._root
        depth = 0
        # reverse inorder walk (right, node, left)
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node = node.right
                depth += 1
            node, depth = stack.pop()
            lines.append(" " * indent * depth + f"└ {node.value}")
            node = node.left
            depth += 1
        return "\n".join(lines)
