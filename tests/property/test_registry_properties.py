"""Property-based tests for OptionRegistry."""

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cmdparse import OptionRegistry, parse_int_prefix
from cmdparse.log import create_lg

COMMANDS = ["-w", "--width", "-v", "--verbose", "--help"]

# Tokens that never equal a registered command
plain_token = st.text(alphabet="abcxyz0123 ", max_size=8)
# Values that are never themselves a registered command
value_token = st.text(alphabet="abc0123456789", min_size=1, max_size=8)
any_token = st.one_of(st.sampled_from(COMMANDS), plain_token)


def _registry() -> OptionRegistry:
    reg = OptionRegistry(lg=create_lg("/test/properties", False))
    reg.register("help", ["--help"], False, "Show help")
    reg.register("w", ["-w", "--width"], True, "Set window width")
    reg.register("v", ["-v", "--verbose"], False, "Verbose output")
    return reg


def _snapshot(reg: OptionRegistry) -> list[tuple]:
    return [dataclasses.astuple(option) for option in reg]


@pytest.mark.property
@pytest.mark.unit
class TestRegistryProperties:
    """Property-based tests for OptionRegistry."""

    @given(tokens=st.lists(plain_token, max_size=10), default=st.integers())
    def test_unmentioned_options_keep_defaults(self, tokens, default):
        """Options never mentioned are unset and return the defaults."""
        reg = _registry()
        reg.parse(tokens)

        for name in ("help", "w", "v"):
            assert reg.is_set(name) is False
        assert reg.get_value_as_string("w", "dflt") == "dflt"
        assert reg.get_value_as_int("w", default) == default

    @given(tokens=st.lists(any_token, max_size=12))
    def test_queries_never_mutate(self, tokens):
        """Accessors and help rendering leave the state untouched."""
        reg = _registry()
        reg.parse(tokens)
        before = _snapshot(reg)

        for name in ("help", "w", "v", "unknown"):
            reg.is_set(name)
        reg.get_value_as_string("w", "")
        reg.get_value_as_int("w", 1)
        reg.format_help()

        assert _snapshot(reg) == before

    @given(values=st.lists(value_token, min_size=1, max_size=5))
    def test_last_match_wins(self, values):
        """The value after the last --width is captured."""
        tokens = ["prog"]
        for value in values:
            tokens += ["--width", value]

        reg = _registry()
        reg.parse(tokens)

        assert reg.get_value_as_string("w", "") == values[-1]
        assert reg.is_set("help") is False

    @given(tokens=st.lists(any_token, max_size=12))
    def test_trailing_value_flag_requests_help(self, tokens):
        """A value-bearing command as the last token always raises help."""
        reg = _registry()
        reg.parse([*tokens, "--width"])

        assert reg.is_set("help") is True
        assert "w" in reg.missing_values

    @given(value=st.text(max_size=12), default=st.integers(min_value=1, max_value=99))
    def test_int_accessor_is_default_or_positive(self, value, default):
        """get_value_as_int never raises and never returns a non-positive number."""
        reg = _registry()
        reg.parse(["prog", "-w", value])

        result = reg.get_value_as_int("w", default)

        assert result == default or result == parse_int_prefix(value) > 0
