"""
Output writers for help text.

Lets print_help() target stdout in production and a buffer in tests.
"""

import sys
from typing import Protocol, TextIO


class OutputWriter(Protocol):
    """Protocol for line-oriented output."""

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        ...


class ConsoleOutput:
    """
    Output writer that writes to a stream (stdout by default).

    Example:
        out = ConsoleOutput()
        registry.print_help(out)
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        # Resolved lazily so a replaced sys.stdout is honoured
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str = "") -> None:
        print(text, file=self.stream)


class BufferedOutput:
    """
    Output writer that captures output to a list.

    Example:
        out = BufferedOutput()
        registry.print_help(out)
        assert out.lines[0] == "Available command line options:"
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        self._lines.append(text)

    @property
    def lines(self) -> list[str]:
        return self._lines.copy()

    @property
    def text(self) -> str:
        """All output as a single string with newlines."""
        return "\n".join(self._lines) + ("\n" if self._lines else "")
