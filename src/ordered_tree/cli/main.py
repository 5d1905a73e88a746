# Minimal CLI using argparse that builds a tree and prints the analytics report.
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ordered_tree.core.config import LOG_LEVELS, DemoConfig, load_config
from ordered_tree.core.errors import TreeError
from ordered_tree.report import build_report, format_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ordered-tree",
        description="Insert integers into a binary search tree and report its shape",
    )
    p.add_argument("--config", type=Path, help="TOML file with demo parameters")
    p.add_argument(
        "--values",
        type=int,
        nargs="*",
        help="Integers to insert, in order (default: 50 30 70 20 40 60 80 10)",
    )
    p.add_argument(
        "--skew",
        type=int,
        nargs="*",
        help="Integers inserted after the first report to unbalance the tree (default: 5)",
    )
    p.add_argument(
        "--pretty",
        action="store_true",
        default=None,
        help="Append a sideways rendering of the final tree",
    )
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    return p


def resolve_config(args: argparse.Namespace) -> DemoConfig:
    """Merge defaults, the optional config file and command-line overrides."""
    config = load_config(args.config) if args.config else DemoConfig()
    if args.values is not None:
        config.values = args.values
    if args.skew is not None:
        config.skew_values = args.skew
    if args.pretty is not None:
        config.pretty = args.pretty
    if args.log_level is not None:
        config.log_level = args.log_level
    return config


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level or "WARNING",
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
    except (OSError, TreeError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 2

    logging.getLogger().setLevel(config.log_level)
    logger.info(f"Running demo with {len(config.values)} values")

    report = build_report(config)
    print(format_report(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
