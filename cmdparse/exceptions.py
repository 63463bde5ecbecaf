"""
Exception hierarchy for cmdparse.

Every error raised by the package derives from CmdParseError, so callers can
catch all parser errors with a single except clause.
"""

from typing import Any


class CmdParseError(Exception):
    """
    Base exception for all cmdparse errors.

    Example:
        try:
            width = registry.get_value_as_int("width", 800)
        except CmdParseError as e:
            lg.error(f"option lookup failed: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class RegistrationError(CmdParseError):
    """Raised when an option cannot be registered (e.g. empty name)."""

    pass


class UnknownOptionError(CmdParseError, KeyError):
    """
    Raised when a value accessor is called for an option that was never registered.

    This is a programming error in the host, not a user error: is_set() is the
    only accessor that tolerates unknown names.
    """

    def __init__(self, name: str) -> None:
        super().__init__("Option is not registered", name=name)
        self.name = name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return CmdParseError.__str__(self)


class HelpConfigError(CmdParseError):
    """Raised when help configuration values are invalid."""

    pass
