"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the cmdparse test suite.
"""

import io
import logging
from collections.abc import Generator

import pytest

from cmdparse import OptionRegistry
from cmdparse.log import Logger, create_lg

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (full system integration)"
    )


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """
    Reset Python logging global state after each test.

    Loggers are cached by name, so a logger created by one test would
    otherwise keep writing to that test's stream.
    """
    original_class = logging.getLoggerClass()
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    yield

    logging.setLoggerClass(original_class)
    for name in list(logging.root.manager.loggerDict.keys()):
        if name.startswith("/"):
            del logging.root.manager.loggerDict[name]
    logging.root.handlers = original_handlers
    logging.root.setLevel(original_level)


@pytest.fixture
def log_stream() -> io.StringIO:
    """Stream receiving the output of the lg fixture."""
    return io.StringIO()


@pytest.fixture
def lg(log_stream: io.StringIO) -> Logger:
    """Trace-level logger without colors writing to log_stream."""
    return create_lg("/test/registry", "trace", colors=False, stream=log_stream)


@pytest.fixture
def registry(lg: Logger) -> OptionRegistry:
    """
    Registry with the options used throughout the examples.

    Options:
        help:  -h, --help
        w:     -w, --width   (value)
        v:     -v, --verbose
    """
    reg = OptionRegistry(lg=lg)
    reg.register("help", ["-h", "--help"], False, "Show help")
    reg.register("w", ["-w", "--width"], True, "Set window width")
    reg.register("v", ["-v", "--verbose"], False, "Verbose output")
    return reg
