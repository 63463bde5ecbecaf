"""Tests for the Option data model."""

import pytest

from cmdparse import Option


@pytest.mark.unit
class TestOption:
    """Tests for Option."""

    def test_defaults(self):
        """Test a fresh option has no parse state."""
        option = Option("help")

        assert option.commands == ()
        assert option.has_value is False
        assert option.help == ""
        assert option.set is False
        assert option.value == ""
        assert option.has_captured_value is False

    def test_reset_clears_parse_state(self):
        """Test reset() clears set and value but keeps the definition."""
        option = Option("w", ("-w",), True, "Set window width", set=True, value="1920")

        option.reset()

        assert option.set is False
        assert option.value == ""
        assert option.commands == ("-w",)
        assert option.help == "Set window width"

    def test_equality_ignores_parse_state(self):
        """Test two options with the same definition compare equal."""
        parsed = Option("w", ("-w",), True, set=True, value="5")

        assert parsed == Option("w", ("-w",), True)
