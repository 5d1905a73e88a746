"""Node containers shared by the unsorted and the ordered trees."""

from __future__ import annotations

from typing import Generic, Optional

from .types import E, T


# -----------------------------
# Binary Tree Node
# -----------------------------
class BinaryTreeNode(Generic[T]):
    """A node in a binary tree holding a value and two optional children."""

    __slots__ = ("value", "left", "right")

    def __init__(
        self,
        value: T,
        left: Optional[BinaryTreeNode[T]] = None,
        right: Optional[BinaryTreeNode[T]] = None,
    ) -> None:
        self.value = value
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.value!r})"


# -----------------------------
# Search Tree Node
# -----------------------------
class SearchTreeNode(BinaryTreeNode[E]):
    """
    A binary tree node that also caches the height of its subtree.
    A freshly created node is a leaf, so its height starts at 1.
    """

    __slots__ = ("height",)

    left: Optional[SearchTreeNode[E]]
    right: Optional[SearchTreeNode[E]]

    def __init__(self, value: E) -> None:
        super().__init__(value)
        self.height = 1

    def __repr__(self) -> str:
        return f"SearchTreeNode({self.value!r}, height={self.height})"


def node_height(node: Optional[SearchTreeNode]) -> int:
    """Cached height of a subtree; an absent subtree has height 0."""
    if node is None:
        return 0
    return node.height


def update_height(node: SearchTreeNode) -> None:
    node.height = 1 + max(node_height(node.left), node_height(node.right))


def balance_factor(node: Optional[SearchTreeNode]) -> int:
    """Height of the left subtree minus height of the right subtree."""
    if node is None:
        return 0
    return node_height(node.left) - node_height(node.right)
