"""
Constants for the logging layer.
"""

import logging


class LogConstants:
    """Constants for the logging layer."""

    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"

    # Extra fields start at this column when the message is shorter
    DEFAULT_RULE_WIDTH: int = 70
    MICRO_RULE_WIDTH: int = 74

    CUSTOM_LEVELS: dict[str, int] = {"TRACE": 5}

    # Log level names for resolution
    LEVEL_NAMES: dict[str, int | bool] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "trace": 5,
        "false": False,  # Special value to disable all logging
    }

    RESET: str = "\x1b[0m"

    # ANSI color per level (without the trailing "m")
    COLORS: dict[int, str] = {
        5: "\x1b[38;5;240",  # Gray for TRACE
        logging.DEBUG: "\x1b[38;5;32",
        logging.INFO: "\x1b[36",
        logging.WARNING: "\x1b[33",
        logging.ERROR: "\x1b[31",
        logging.CRITICAL: "\x1b[35",
    }
