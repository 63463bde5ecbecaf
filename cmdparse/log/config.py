"""
Logger configuration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


def resolve_level(level: str | int | bool) -> int | bool:
    """
    Resolve log level from string, numeric value, or boolean.

    Args:
        level: Level name ("info", "trace", ...), number, or False to disable logging

    Returns:
        Numeric log level, or False when logging is disabled

    Raises:
        InvalidLogLevelError: If the level name is unknown
    """
    if isinstance(level, bool):
        return logging.INFO if level else False
    if isinstance(level, int):
        return level
    if level.isnumeric():
        return int(level)
    if level.lower() in LogConstants.LEVEL_NAMES:
        return LogConstants.LEVEL_NAMES[level.lower()]
    raise InvalidLogLevelError(level)


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable logger configuration.

    Attributes:
        level: Numeric log level, or False to disable logging
        colors: Whether to color the level prefix with ANSI codes
        micros: Whether timestamps carry microsecond precision
    """

    level: int | bool = logging.INFO
    colors: bool = True
    micros: bool = False

    @classmethod
    def from_params(
        cls,
        level: str | int | bool,
        colors: bool = True,
        micros: bool = False,
    ) -> LogConfig:
        """Create LogConfig from individual parameters."""
        return cls(level=resolve_level(level), colors=colors, micros=micros)

    @classmethod
    def from_config(cls, config_dict: dict, section: str = "logging") -> LogConfig:
        """
        Create LogConfig from a configuration dictionary.

        Args:
            config_dict: Nested configuration mapping
            section: Dotted path of the logging section (default: "logging")

        Example:
            LogConfig.from_config({"logging": {"level": "debug", "colors": False}})
        """
        current = config_dict
        for part in section.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                current = {}
                break

        level = current.get("level", "info")
        colors = current.get("colors", True)
        micros = current.get("microseconds", current.get("micros", False))
        return cls.from_params(level, colors=bool(colors), micros=bool(micros))
