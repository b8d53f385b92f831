"""Tests for roster line parsing."""

from __future__ import annotations

import pytest

from gamerena.core.exceptions import EntryParseError, InvalidArgumentError
from gamerena.host.parsing import DEFAULT_TEAM, ParsedEntry, parse_entry


class TestParseEntry:
    """Tests for parse_entry."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("Alice@red", ParsedEntry("Alice", "red")),
            ("Alice@red\n", ParsedEntry("Alice", "red")),
            ("Alice@red\r\n", ParsedEntry("Alice", "red")),
            ("a@b@c", ParsedEntry("a@b", "c")),
            ("Bob", ParsedEntry("Bob", DEFAULT_TEAM)),
            ("Sir Bob the Brave@blue team", ParsedEntry("Sir Bob the Brave", "blue team")),
        ],
    )
    def test_valid_lines(self, line: str, expected: ParsedEntry) -> None:
        """Test the split happens at the last @."""
        assert parse_entry(line) == expected

    def test_default_team_name(self) -> None:
        """Test the default team keeps its reserved spelling."""
        assert DEFAULT_TEAM == "~@Default"

    def test_command_line(self) -> None:
        """Test > lines are flagged as commands."""
        entry = parse_entry(">status")
        assert entry.is_command

    def test_empty_name(self) -> None:
        """Test a line starting with @ has no name."""
        with pytest.raises(EntryParseError) as exc_info:
            parse_entry("@red")

        assert exc_info.value.details["field_name"] == "name"
        assert exc_info.value.message == "Name shouldn't be empty"

    def test_empty_line(self) -> None:
        """Test an empty line has no name."""
        with pytest.raises(EntryParseError):
            parse_entry("")

    def test_empty_team(self) -> None:
        """Test a trailing @ leaves the team empty."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_entry("Alice@")

        assert exc_info.value.details["field_name"] == "team_name"
        assert exc_info.value.details["line"] == "Alice@"
