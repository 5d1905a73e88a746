"""Ordered Tree - a generic binary search tree with balance analytics."""

from .core.binary_tree import BinaryTree
from .core.config import DemoConfig, load_config
from .core.errors import ConfigError, InvalidArgumentError, TreeError
from .core.nodes import BinaryTreeNode, SearchTreeNode
from .core.search_tree import BinarySearchTree
from .core.types import SupportsLessThan

__all__ = [
    "BinaryTree",
    "BinarySearchTree",
    "BinaryTreeNode",
    "SearchTreeNode",
    "DemoConfig",
    "load_config",
    "TreeError",
    "InvalidArgumentError",
    "ConfigError",
    "SupportsLessThan",
]
