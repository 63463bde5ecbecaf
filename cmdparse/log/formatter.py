"""
Log formatter rendering structured extra fields.
"""

import logging
from datetime import datetime

from .config import LogConfig
from .constants import LogConstants
from .logger import EXTRA_ATTR


def _format_extra(record: logging.LogRecord) -> str:
    """Render extra fields as ' [key:value] ...' sorted by key."""
    extra = getattr(record, EXTRA_ATTR, None)
    if not extra:
        return ""

    parts = []
    for key in sorted(extra):
        value = extra[key]
        if isinstance(value, (list, tuple)):
            value = ",".join(map(str, value))
        elif isinstance(value, Exception):
            value = value.__class__.__name__
        parts.append(f"[{key}:{value}]")
    return " " + " ".join(parts)


class LogFormatter(logging.Formatter):
    """
    Formatter producing lines like:

        [12:34:56,789] [W] missing value [command:-w] [option:width] [/cmdparse/registry]
    """

    def __init__(self, config: LogConfig):
        super().__init__(LogConstants.DEFAULT_FORMAT)
        self._config = config

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        ts = datetime.fromtimestamp(record.created)
        if self._config.micros:
            return ts.strftime("%H:%M:%S,%f")
        return ts.strftime("%H:%M:%S,") + f"{int(record.msecs):03d}"

    def _colorize(self, record: logging.LogRecord, text: str) -> str:
        color = LogConstants.COLORS.get(record.levelno)
        if not self._config.colors or color is None:
            return text
        return f"{color}m{text}{LogConstants.RESET}"

    def format(self, record: logging.LogRecord) -> str:
        head = super().format(record)
        rule = (
            LogConstants.MICRO_RULE_WIDTH
            if self._config.micros
            else LogConstants.DEFAULT_RULE_WIDTH
        )
        # Exception text goes after the tail, so pad only the first line
        first, sep, rest = head.partition("\n")
        line = first.ljust(rule) if _format_extra(record) else first
        line = self._colorize(record, line)
        line += _format_extra(record) + f" [{record.name}]"
        return line + sep + rest
