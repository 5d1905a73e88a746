"""Exception hierarchy for the ordered tree package.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class TreeError(Exception):
    """Base exception for all ordered tree errors."""
    pass


class InvalidArgumentError(TreeError, ValueError):
    """Raised when an absent (None) value is inserted into a tree."""
    pass


class ConfigError(TreeError):
    """Raised when a demo configuration is malformed."""
    pass
