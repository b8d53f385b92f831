"""Parsing of ``name@team`` roster lines."""

from __future__ import annotations

from dataclasses import dataclass

from gamerena.core.exceptions import EntryParseError


DEFAULT_TEAM = "~@Default"
COMMAND_PREFIX = ">"


@dataclass(frozen=True)
class ParsedEntry:
    """One parsed input line.

    Attributes:
        name: Entity name, everything before the last ``@``.
        team_name: Team name, everything after it.
        is_command: True for ``>`` lines, which carry no roster entry.
    """

    name: str
    team_name: str
    is_command: bool = False


def parse_entry(line: str) -> ParsedEntry:
    """Split a roster line into an entity name and a team name.

    The split happens at the last ``@``, so entity names may themselves
    contain ``@``. A line without ``@`` joins the default team.

    Args:
        line: One input line; a trailing line break is ignored.

    Returns:
        The parsed entry.

    Raises:
        EntryParseError: If the name or the team part is empty.

    Example:
        >>> parse_entry("Alice@red")
        ParsedEntry(name='Alice', team_name='red', is_command=False)
        >>> parse_entry("Bob").team_name
        '~@Default'
    """
    text = line.rstrip("\r\n")
    if text.startswith(COMMAND_PREFIX):
        return ParsedEntry(name="", team_name="", is_command=True)

    name, sep, team = text.rpartition("@")
    if not sep:
        name, team = text, DEFAULT_TEAM

    if not name:
        raise EntryParseError("Name shouldn't be empty", line=text, field_name="name")
    if not team:
        raise EntryParseError("Team name shouldn't be empty", line=text, field_name="team_name")
    return ParsedEntry(name=name, team_name=team)


__all__ = [
    "DEFAULT_TEAM",
    "ParsedEntry",
    "parse_entry",
]
