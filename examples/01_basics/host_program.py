#!/usr/bin/env python3
"""
Host program example.

Registers a few options, parses the process arguments and reacts to the help
flag, which is also raised when a value option is given without its value.

Usage:
    python examples/01_basics/host_program.py -w 1920 --title demo
    python examples/01_basics/host_program.py -w        # missing value, shows help
"""

import sys

from cmdparse import HelpConfig, OptionRegistry
from cmdparse.log import create_lg


def main() -> int:
    lg = create_lg("/example", "info")
    registry = OptionRegistry(HelpConfig(footer="Values follow their flag, e.g. -w 1920"))
    registry.register("help", ["-h", "--help"], False, "Show help")
    registry.register("width", ["-w", "--width"], True, "Set window width")
    registry.register("title", ["-t", "--title"], True, "Window title")
    registry.register("verbose", ["-v", "--verbose"], False, "Verbose output")

    registry.parse(sys.argv)

    if registry.is_set("help"):
        registry.print_help()
        return 0

    width = registry.get_value_as_int("width", 1280)
    title = registry.get_value_as_string("title", "untitled")
    lg.info("starting", extra={"width": width, "title": title})
    if registry.is_set("verbose"):
        lg.info("verbose output enabled")
    return 0


if __name__ == "__main__":
    exit(main())
