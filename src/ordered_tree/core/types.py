"""Common type definitions for the ordered tree implementation.

Elements only need to support ``<``; equality between two elements is
derived from the ordering (neither is less than the other).
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar


class SupportsLessThan(Protocol):
    """A protocol expressing that a type supports a total ``<`` ordering."""

    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T")
E = TypeVar("E", bound=SupportsLessThan)


def compare(a: SupportsLessThan, b: SupportsLessThan) -> int:
    """Three-way comparison built on ``<`` alone: -1, 0 or 1."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0
