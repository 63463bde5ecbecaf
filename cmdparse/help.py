"""
Help listing for registered options.

Two renderings of the same listing:
- plain text, one line per option (" -w, --width: Set window width")
- a rich table for interactive terminals
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import HelpConfig
from .output import ConsoleOutput, OutputWriter

if TYPE_CHECKING:
    from .option import Option


def listed_options(options: Iterable[Option]) -> list[Option]:
    """Options that can appear on a command line (at least one command token)."""
    return [option for option in options if option.commands]


class HelpRenderer:
    """Renders the help listing for a sequence of options."""

    def __init__(self, config: HelpConfig | None = None) -> None:
        self.config = config or HelpConfig()

    def format_option(self, option: Option) -> str:
        """Format a single listing line."""
        commands = self.config.separator.join(option.commands)
        return f"{self.config.indent}{commands}: {option.help}"

    def lines(self, options: Iterable[Option]) -> list[str]:
        """All listing lines: header, one per option, then footer if configured."""
        result = [self.config.header]
        result.extend(self.format_option(option) for option in listed_options(options))
        if self.config.footer:
            result.append(self.config.footer)
        return result

    def render_text(self, options: Iterable[Option]) -> str:
        return "\n".join(self.lines(options)) + "\n"

    def write(self, options: Iterable[Option], out: OutputWriter | None = None) -> None:
        """Write the plain listing line by line."""
        out = out or ConsoleOutput()
        for line in self.lines(options):
            out.write(line)

    def build_table(self, options: Iterable[Option]) -> Table:
        """Build a two-column rich table (commands, help) for the options."""
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column(style="cyan", no_wrap=True)
        table.add_column()
        for option in listed_options(options):
            commands = self.config.separator.join(option.commands)
            if option.has_value:
                commands += " VALUE"
            table.add_row(commands, option.help)
        return table

    def print_rich(self, options: Iterable[Option], console: Console | None = None) -> None:
        """Print the listing as a rich table."""
        console = console or Console()
        console.print(Text(self.config.header, style="bold"))
        console.print(self.build_table(options))
        if self.config.footer:
            console.print(Text(self.config.footer, style="dim"))
