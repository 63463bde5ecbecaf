"""
Option registry: registration, token scanning and typed accessors.

A host program registers its options once at startup, calls parse() with the
process argument vector, then queries the results:

    registry = OptionRegistry()
    registry.register("help", ["--help"], False, "Show help")
    registry.register("width", ["-w", "--width"], True, "Set window width")
    registry.parse(sys.argv)

    if registry.is_set("help"):
        registry.print_help()
        sys.exit(0)
    width = registry.get_value_as_int("width", 1280)
"""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, Sequence

from rich.console import Console

from .config import HelpConfig
from .constants import (
    DEFAULT_REGISTRY_LOG_LEVEL,
    HELP_OPTION,
    INT_MAX,
    LONG_MAX,
    LONG_MIN,
    NO_VALUE,
    REGISTRY_LOGGER_NAME,
)
from .exceptions import RegistrationError, UnknownOptionError
from .help import HelpRenderer
from .log import Logger, create_lg
from .option import Option
from .output import OutputWriter

# C-locale whitespace, optional sign, then base-10 digits
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")

# Digits of LONG_MAX; longer runs always saturate
_LONG_DIGITS = len(str(LONG_MAX))


def parse_int_prefix(text: str) -> int:
    """
    Convert the leading base-10 integer of text, strtol style.

    Trailing garbage is ignored ("12px" -> 12); text without leading digits
    converts to 0. Out-of-range values saturate at LONG_MIN / LONG_MAX.
    """
    match = _INT_PREFIX.match(text)
    if not match:
        return 0

    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > _LONG_DIGITS:
        return LONG_MIN if sign == "-" else LONG_MAX

    number = int(sign + digits)
    return max(LONG_MIN, min(LONG_MAX, number))


class OptionRegistry:
    """
    Named command-line options and their parse state.

    Scan quirks kept for compatibility with existing command lines:
    - every (option, command) pair re-scans the whole token list
    - a value-bearing command captures the next token even if it is a flag
    - repeated commands: the last match wins
    - a missing value stops scanning that option and raises the "help" flag
    """

    def __init__(
        self,
        help_config: HelpConfig | None = None,
        lg: Logger | None = None,
    ) -> None:
        """
        Initialize an empty registry.

        Args:
            help_config: Layout of the help listing (defaults to HelpConfig())
            lg: Logger for parse diagnostics (defaults to a warning-level
                logger named /cmdparse/registry)
        """
        self._options: dict[str, Option] = {}
        self._missing: list[str] = []
        self._help = HelpRenderer(help_config)
        self._lg = lg or create_lg(REGISTRY_LOGGER_NAME, DEFAULT_REGISTRY_LOG_LEVEL)

    # -- registration ---------------------------------------------------------

    def register(
        self,
        name: str,
        commands: Iterable[str],
        has_value: bool = False,
        help: str = "",
    ) -> Option:
        """
        Register an option, replacing any option of the same name.

        Replacing keeps the option's position in the help listing and resets
        its parse state.

        Args:
            name: Unique option name queried through the accessors
            commands: Accepted command tokens (e.g. ["-w", "--width"])
            has_value: Whether a matched command consumes the following token
            help: Help text for the listing

        Returns:
            The registered Option

        Raises:
            RegistrationError: If name is empty
        """
        if not name:
            raise RegistrationError("Option must have a name")
        if isinstance(commands, str):
            commands = [commands]

        option = Option(name=name, commands=tuple(commands), has_value=has_value, help=help)
        replaced = name in self._options
        self._options[name] = option

        if not option.commands:
            self._lg.debug("option has no commands", extra={"option": name})
        self._lg.trace(
            "registered option",
            extra={"option": name, "commands": option.commands, "replaced": replaced},
        )
        return option

    # -- parsing --------------------------------------------------------------

    def _scan(self, option: Option, tokens: Sequence[str]) -> bool:
        """
        Scan tokens for every command of option.

        Returns:
            False if a matched value-bearing command had no value
        """
        for command in option.commands:
            for index, token in enumerate(tokens):
                if token != command:
                    continue

                option.set = True
                if not option.has_value:
                    continue

                following = index + 1
                if following < len(tokens):
                    option.value = tokens[following]
                if following >= len(tokens) or tokens[following] == NO_VALUE:
                    self._lg.warning(
                        "missing value",
                        extra={"option": option.name, "command": command},
                    )
                    return False
        return True

    def parse(self, tokens: Sequence[str] | None = None) -> None:
        """
        Match the tokens against every registered option.

        Matched options get set=True; value-bearing ones capture the token
        that follows the match. If any value-bearing option was given without
        a value, the "help" option is set so the host can print usage.

        Args:
            tokens: Argument vector including the program path at index 0
                (defaults to sys.argv)
        """
        if tokens is None:
            tokens = sys.argv
        tokens = list(tokens)

        self._missing = [
            option.name
            for option in self._options.values()
            if not self._scan(option, tokens)
        ]

        if self._missing:
            self._request_help()

        self._lg.debug(
            "parsed arguments",
            extra={
                "tokens": len(tokens),
                "set": [o.name for o in self._options.values() if o.set],
            },
        )

    def _request_help(self) -> None:
        option = self._options.get(HELP_OPTION)
        if option is None:
            self._lg.warning(
                "help option not registered, adding placeholder",
                extra={"missing": self._missing},
            )
            option = self._options[HELP_OPTION] = Option(name=HELP_OPTION)
        option.set = True

    @property
    def missing_values(self) -> list[str]:
        """Names of options given without their required value in the last parse."""
        return self._missing.copy()

    # -- help -----------------------------------------------------------------

    @property
    def help_config(self) -> HelpConfig:
        return self._help.config

    def format_help(self) -> str:
        """Return the plain help listing as a string."""
        return self._help.render_text(self._options.values())

    def print_help(
        self,
        out: OutputWriter | None = None,
        rich: bool = False,
        console: Console | None = None,
    ) -> None:
        """
        Print the help listing (stdout by default).

        Args:
            out: Destination for the plain listing
            rich: Render a rich table instead of plain lines
            console: Console for the rich rendering
        """
        if rich:
            self._help.print_rich(self._options.values(), console)
        else:
            self._help.write(self._options.values(), out)

    # -- accessors ------------------------------------------------------------

    def _require(self, name: str) -> Option:
        option = self._options.get(name)
        if option is None:
            raise UnknownOptionError(name)
        return option

    def is_set(self, name: str) -> bool:
        """
        Check whether an option was matched by the last parse.

        Unknown names return False.
        """
        option = self._options.get(name)
        return option is not None and option.set

    def get_value_as_string(self, name: str, default: str) -> str:
        """
        Get the captured value of an option.

        Args:
            name: Registered option name
            default: Returned when no value was captured

        Raises:
            UnknownOptionError: If name is not registered
        """
        option = self._require(name)
        return option.value if option.has_captured_value else default

    def get_value_as_int(self, name: str, default: int) -> int:
        """
        Get the captured value of an option as a positive integer.

        The value is converted strtol style. Returns default when no value was
        captured, or when the converted number is not strictly positive or does
        not fit a signed 32-bit int. Malformed text never raises.

        Args:
            name: Registered option name
            default: Fallback value

        Raises:
            UnknownOptionError: If name is not registered
        """
        option = self._require(name)
        if not option.has_captured_value:
            return default

        number = parse_int_prefix(option.value)
        if number <= 0 or number > INT_MAX:
            self._lg.debug(
                "rejected integer value",
                extra={"option": name, "value": option.value, "default": default},
            )
            return default
        return number

    # -- read-only views ------------------------------------------------------

    def get(self, name: str) -> Option | None:
        return self._options.get(name)

    def names(self) -> list[str]:
        return list(self._options)

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[Option]:
        return iter(list(self._options.values()))
