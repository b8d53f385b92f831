"""Text host for the arena: roster parsing, rendering and the CLI."""

from __future__ import annotations

from gamerena.host.cli import build_parser, main, read_roster
from gamerena.host.parsing import DEFAULT_TEAM, ParsedEntry, parse_entry
from gamerena.host.report import (
    SKILL_VERBS,
    health_bar,
    render_entity,
    render_event,
    render_teams,
)


__all__ = [
    # Parsing
    "DEFAULT_TEAM",
    "ParsedEntry",
    "parse_entry",
    # Rendering
    "SKILL_VERBS",
    "health_bar",
    "render_entity",
    "render_teams",
    "render_event",
    # CLI
    "build_parser",
    "read_roster",
    "main",
]
