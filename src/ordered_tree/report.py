"""Builds and renders the demo report for a tree of integers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .core.config import DemoConfig
from .core.search_tree import BinarySearchTree

logger = logging.getLogger(__name__)


@dataclass
class TreeReport:
    """Snapshot of every query the demo prints, before and after skewing."""

    in_order: List[int]
    root_value: Optional[int]
    root_height: int
    child_heights: List[Tuple[int, int]]
    depth_sum: int
    skew_2l: List[int]
    is_bst: bool
    is_avl: bool
    skew_values: List[int] = field(default_factory=list)
    is_avl_after_skew: Optional[bool] = None
    skew_2l_after_skew: List[int] = field(default_factory=list)
    rendering: Optional[str] = None


def _join(values: List[int]) -> str:
    return " ".join(str(v) for v in values) if values else "(none)"


def build_report(config: DemoConfig) -> TreeReport:
    """Run the demo workload described by `config` and collect the results."""
    tree: BinarySearchTree[int] = BinarySearchTree(config.values)
    logger.info(f"Built tree of {len(tree)} nodes from {len(config.values)} values")

    root = tree.root
    child_heights = []
    if root is not None:
        for child in (root.left, root.right):
            if child is not None:
                child_heights.append((child.value, tree.height(child.value)))

    report = TreeReport(
        in_order=tree.in_order(),
        root_value=root.value if root is not None else None,
        root_height=tree.height(),
        child_heights=child_heights,
        depth_sum=tree.sum_depths(),
        skew_2l=tree.find_skew_2l_nodes(),
        is_bst=tree.is_bst(),
        is_avl=tree.is_avl(),
    )

    if config.skew_values:
        tree.build_tree(config.skew_values)
        report.skew_values = list(config.skew_values)
        report.is_avl_after_skew = tree.is_avl()
        report.skew_2l_after_skew = tree.find_skew_2l_nodes()

    if config.pretty:
        report.rendering = tree.pretty_print()
    return report


def format_report(report: TreeReport) -> str:
    """Render a report as the newline-separated lines printed by the CLI."""
    lines = [f"In-order traversal: {_join(report.in_order)}"]
    if report.root_value is None:
        lines.append(f"Height of root: {report.root_height}")
    else:
        lines.append(f"Height of root ({report.root_value}): {report.root_height}")
    for value, height in report.child_heights:
        lines.append(f"Height of {value}: {height}")
    lines += [
        f"Depth summation: {report.depth_sum}",
        f"2L nodes: {_join(report.skew_2l)}",
        f"Valid BST: {report.is_bst}",
        f"Valid AVL: {report.is_avl}",
    ]
    if report.skew_values:
        added = ", ".join(str(v) for v in report.skew_values)
        lines += [
            f"Adding {added} to skew the tree",
            f"Valid AVL: {report.is_avl_after_skew}",
            f"2L nodes: {_join(report.skew_2l_after_skew)}",
        ]
    if report.rendering is not None:
        lines.append(report.rendering)
    return "\n".join(lines)
