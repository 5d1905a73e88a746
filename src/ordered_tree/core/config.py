"""Configuration for the ordered tree demo harness.

The tree itself takes no configuration; these parameters only drive the
report printed by the ``ordered-tree`` command.
"""

from __future__ import annotations

import logging
import tomllib  # Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_VALUES = [50, 30, 70, 20, 40, 60, 80, 10]
DEFAULT_SKEW_VALUES = [5]
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _int_list(data: Dict[str, Any], key: str, default: List[int]) -> List[int]:
    raw = data.get(key, default)
    if not isinstance(raw, list) or not all(
        isinstance(item, int) and not isinstance(item, bool) for item in raw
    ):
        raise ConfigError(f"'{key}' must be a list of integers, got {raw!r}")
    return list(raw)


@dataclass
class DemoConfig:
    """Parameters for the demo report.

    Attributes:
        values: Integers inserted, in order, before the first report section
        skew_values: Integers inserted afterwards to unbalance the tree
        pretty: Whether to append a rendering of the final tree
        log_level: Name of the logging level configured by the CLI
    """

    values: List[int] = field(default_factory=lambda: list(DEFAULT_VALUES))
    skew_values: List[int] = field(default_factory=lambda: list(DEFAULT_SKEW_VALUES))
    pretty: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> DemoConfig:
        unknown = set(data) - {"values", "skew_values", "pretty", "log_level"}
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")

        pretty = data.get("pretty", False)
        if not isinstance(pretty, bool):
            raise ConfigError(f"'pretty' must be a boolean, got {pretty!r}")

        log_level = data.get("log_level", "WARNING")
        if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"'log_level' must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        return cls(
            values=_int_list(data, "values", DEFAULT_VALUES),
            skew_values=_int_list(data, "skew_values", DEFAULT_SKEW_VALUES),
            pretty=pretty,
            log_level=log_level.upper(),
        )


def load_config(path: Path) -> DemoConfig:
    """Load a DemoConfig from a TOML file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid UTF-8: {e}") from e
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    logger.info(f"Loaded demo config from {path}")
    return DemoConfig.from_dict(data)
