"""
Structured logging for cmdparse.

Builds on Python's standard logging with:
- A custom TRACE level below DEBUG
- Structured extra fields rendered as [key:value]
- Optional ANSI colored level prefixes
- Complete logging disable (level=False or level="false")
"""

import logging
from typing import IO, Any

from .config import LogConfig, resolve_level
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatter import LogFormatter
from .logger import Logger

logging.addLevelName(LogConstants.CUSTOM_LEVELS["TRACE"], "TRACE")


def create_lg(
    name: str,
    level: str | int | bool = "info",
    colors: bool = True,
    micros: bool = False,
    extra: dict[str, Any] | None = None,
    stream: IO[str] | None = None,
) -> Logger:
    """
    Create a logger with the specified configuration.

    Convenience wrapper around LoggerFactory.create() that builds the
    LogConfig from plain parameters.

    Example:
        >>> lg = create_lg("/viewer", "debug", colors=False)
    """
    config = LogConfig.from_params(level, colors=colors, micros=micros)
    return LoggerFactory.create(name, config, extra=extra, stream=stream)


def derive_lg(lg: Logger, tag: str) -> Logger:
    """Derive a tagged child logger from lg."""
    return LoggerFactory.derive(lg, tag)


__all__ = [
    "Logger",
    "LoggerFactory",
    "LogConfig",
    "LogConstants",
    "LogFormatter",
    "LogError",
    "InvalidLogLevelError",
    "resolve_level",
    "create_lg",
    "derive_lg",
]
