"""
Configuration for help rendering.

HelpConfig is immutable so a registry's help layout cannot drift between
calls to print_help().
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from .constants import (
    DEFAULT_COMMAND_SEPARATOR,
    DEFAULT_HELP_FOOTER,
    DEFAULT_HELP_HEADER,
    DEFAULT_HELP_INDENT,
)
from .exceptions import HelpConfigError


@dataclass(frozen=True)
class HelpConfig:
    """
    Immutable layout settings for the help listing.

    Attributes:
        header: First line of the listing
        footer: Trailing text printed after the options (empty to omit)
        separator: Joins the command tokens of one option
        indent: Prefix of every option line
    """

    header: str = DEFAULT_HELP_HEADER
    footer: str = DEFAULT_HELP_FOOTER
    separator: str = DEFAULT_COMMAND_SEPARATOR
    indent: str = DEFAULT_HELP_INDENT

    @staticmethod
    def _navigate_to_section(config_dict: dict, section: str) -> dict:
        """Navigate to a dotted section in a nested dict, or {} if absent."""
        current: Any = config_dict
        for part in section.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return {}
        return current if isinstance(current, dict) else {}

    @classmethod
    def from_dict(cls, config_dict: dict, section: str = "help") -> HelpConfig:
        """
        Create a HelpConfig from a configuration dictionary.

        Unknown keys are ignored; missing keys keep their defaults.

        Args:
            config_dict: Nested configuration mapping
            section: Dotted path of the help section (default: "help")

        Returns:
            HelpConfig instance

        Raises:
            HelpConfigError: If a known key holds a non-string value

        Example:
            cfg = HelpConfig.from_dict({"help": {"footer": "Press any key to close..."}})
        """
        current = cls._navigate_to_section(config_dict, section)

        values: dict[str, str] = {}
        for field in fields(cls):
            if field.name not in current:
                continue
            value = current[field.name]
            if not isinstance(value, str):
                raise HelpConfigError(
                    "Help setting must be a string",
                    key=field.name,
                    type=type(value).__name__,
                )
            values[field.name] = value

        return cls(**values)
