"""Ordered tree core package."""

from .binary_tree import BinaryTree
from .search_tree import BinarySearchTree

__all__ = ["BinaryTree", "BinarySearchTree"]
