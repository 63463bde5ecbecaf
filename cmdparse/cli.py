#!/usr/bin/env python3
"""
cmdparse-demo: parse a viewer command line and show the resolved settings.

Usage:
    cmdparse-demo -w 1920 -h 1080 --vsync
    cmdparse-demo --benchmark -bw 2 -br 30
    cmdparse-demo --help
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from .config import HelpConfig
from .log import InvalidLogLevelError, create_lg
from .presets import ViewerSettings, register_viewer_options
from .registry import OptionRegistry

DEMO_LOG_LEVEL = "warning"


def build_registry() -> OptionRegistry:
    """Registry holding the viewer options plus the demo's own switches."""
    lg = create_lg("/cmdparse/demo/registry", DEMO_LOG_LEVEL)
    registry = OptionRegistry(HelpConfig(), lg=lg)
    register_viewer_options(registry)
    registry.register("loglevel", ["--log-level"], True, "Log level of the demo")
    registry.register("plain", ["--plain"], False, "Print plain text instead of tables")
    return registry


def _settings_table(settings: ViewerSettings) -> Table:
    table = Table(title="Viewer settings", show_header=True)
    table.add_column("Setting", style="bold blue")
    table.add_column("Value")
    for field in dataclasses.fields(settings):
        value = getattr(settings, field.name)
        if dataclasses.is_dataclass(value):
            for sub in dataclasses.fields(value):
                table.add_row(f"{field.name}.{sub.name}", str(getattr(value, sub.name)))
        else:
            table.add_row(field.name, str(value))
    return table


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """
    Entry point for the demo.

    Args:
        argv: Argument vector including the program path (defaults to sys.argv)
        console: Console for output (defaults to stdout)

    Returns:
        Process exit code
    """
    console = console or Console()
    registry = build_registry()
    registry.parse(argv)

    plain = registry.is_set("plain")
    if registry.is_set("help"):
        if plain:
            registry.print_help()
        else:
            registry.print_help(rich=True, console=console)
        return 0

    level = registry.get_value_as_string("loglevel", DEMO_LOG_LEVEL)
    try:
        lg = create_lg("/cmdparse/demo", level)
    except InvalidLogLevelError as e:
        console.print(f"[red]error:[/red] {e}", highlight=False)
        return 2
    lg.debug("resolving settings", extra={"options": registry.names()})

    settings = ViewerSettings.from_registry(registry, lg=lg)
    if plain:
        for key, value in dataclasses.asdict(settings).items():
            console.print(f"{key}: {value}", highlight=False)
    else:
        console.print(_settings_table(settings))
    return 0


if __name__ == "__main__":
    exit(main())
