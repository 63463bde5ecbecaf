"""
Option data model.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import NO_VALUE


@dataclass
class Option:
    """
    A registered command-line option and its parse state.

    Attributes:
        name: Unique key of the option in its registry
        commands: Accepted command tokens, in display order (e.g. ("-w", "--width"))
        has_value: Whether a matched command consumes the following token
        help: Help text shown in the listing
        set: Whether the option was matched during the last parse
        value: Captured value, NO_VALUE ("") when nothing was captured
    """

    name: str
    commands: tuple[str, ...] = ()
    has_value: bool = False
    help: str = ""
    set: bool = field(default=False, compare=False)
    value: str = field(default=NO_VALUE, compare=False)

    def reset(self) -> None:
        """Clear parse state."""
        self.set = False
        self.value = NO_VALUE

    @property
    def has_captured_value(self) -> bool:
        return self.value != NO_VALUE
