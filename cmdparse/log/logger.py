"""
Logger class with a TRACE level and structured extra fields.
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants

# Record attribute holding the merged extra fields, read by LogFormatter
EXTRA_ATTR = "__cmdparse__extra"


class Logger(logging.Logger):
    """
    Logger with structured extras and a TRACE level.

    Extends the standard Python logger with:
    - Pre-populated extra fields merged into every record
    - A trace() method below DEBUG
    - Handler sharing for derived loggers
    - Complete disabling via LogConfig(level=False)
    """

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        extra: dict[str, Any] | None = None,
    ):
        """
        Initialize the logger.

        Args:
            name: Logger name
            config: Logger configuration (defaults to LogConfig())
            extra: Extra fields included in all records of this logger
        """
        if config is None:
            config = LogConfig()

        if config.level is False:
            super().__init__(name, logging.CRITICAL + 1)
            self._logging_disabled = True
        else:
            super().__init__(name, config.level)
            self._logging_disabled = False

        self._config = config
        self._extra = dict(extra or {})
        self._root_logger: Logger | None = None  # Set for derived loggers

    @property
    def config(self) -> LogConfig:
        return self._config

    @property
    def disabled(self) -> bool:  # type: ignore[override]
        """Check if logging is disabled."""
        return self._logging_disabled

    @disabled.setter
    def disabled(self, value: bool) -> None:
        self._logging_disabled = value

    @property
    def extra(self) -> dict[str, Any]:
        return dict(self._extra)

    def makeRecord(  # type: ignore[override]
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: object,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        """Create a record carrying the merged extra fields."""
        merged = self._extra.copy()
        if extra:
            merged.update(extra)
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func=func, sinfo=sinfo
        )
        setattr(record, EXTRA_ATTR, merged)
        return record

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """
        Log a TRACE level message.

        Args:
            msg: Log message
            *args: Message format arguments
            **kwargs: Additional keyword arguments including 'extra' for structured data
        """
        trace_level = LogConstants.CUSTOM_LEVELS["TRACE"]
        if self.isEnabledFor(trace_level):
            self._log(trace_level, msg, args, **kwargs)

    def isEnabledFor(self, level: int) -> bool:
        if self._logging_disabled:
            return False
        return super().isEnabledFor(level)

    def callHandlers(self, record: logging.LogRecord) -> None:
        """
        Pass a record to all relevant handlers.

        Derived loggers (those with _root_logger set) delegate to the root
        logger's handlers instead of holding their own.
        """
        if self._root_logger is not None:
            for handler in self._root_logger.handlers:
                if record.levelno >= handler.level:
                    handler.handle(record)
        else:
            super().callHandlers(record)
