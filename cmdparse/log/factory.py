"""
Factory for creating and deriving loggers.
"""

import logging
import sys
from typing import IO, Any

from .config import LogConfig
from .formatter import LogFormatter
from .logger import Logger


class _StderrHandler(logging.StreamHandler):
    """StreamHandler that writes to whatever sys.stderr is at emit time."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property  # type: ignore[override]
    def stream(self) -> IO[str]:
        return sys.stderr

    @stream.setter
    def stream(self, value: IO[str]) -> None:
        pass


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        extra: dict[str, Any] | None = None,
        stream: IO[str] | None = None,
    ) -> Logger:
        """
        Create a logger with the specified configuration.

        An existing logger of the same name is returned unchanged.

        Args:
            name: Logger name (e.g. "/cmdparse/registry")
            config: Logger configuration
            extra: Pre-populated extra fields to include in all records
            stream: Handler stream (default: sys.stderr)

        Returns:
            Configured logger instance

        Example:
            >>> lg = LoggerFactory.create("/viewer", LogConfig.from_params("debug"))
            >>> lg.debug("parsed", extra={"tokens": 3})
            [12:34:56,789] [D] parsed [tokens:3] [/viewer]
        """
        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            return existing

        lg = Logger(name, config, extra)
        handler: logging.StreamHandler = (
            logging.StreamHandler(stream) if stream is not None else _StderrHandler()
        )
        handler.setFormatter(LogFormatter(config))
        lg.addHandler(handler)
        lg.propagate = False
        lg.parent = logging.root

        # Register so later create() calls with this name reuse it
        logging.root.manager.loggerDict[name] = lg
        lg.trace("created logger", extra={"level": logging.getLevelName(lg.level)})
        return lg

    @staticmethod
    def derive(parent: Logger, tag: str, extra: dict[str, Any] | None = None) -> Logger:
        """
        Derive a child logger that shares the parent's handlers and level.

        Args:
            parent: Parent logger
            tag: Name component appended to the parent's name
            extra: Extra fields added on top of the parent's

        Example:
            >>> child = LoggerFactory.derive(lg, "presets")   # "/viewer/presets"
        """
        name = f"{parent.name.rstrip('/')}/{tag}"
        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            return existing

        merged = parent.extra
        merged.update(extra or {})
        lg = Logger(name, parent.config, merged)
        lg.setLevel(parent.level)
        lg._root_logger = parent._root_logger or parent
        lg.propagate = False
        lg.parent = parent
        logging.root.manager.loggerDict[name] = lg
        return lg
