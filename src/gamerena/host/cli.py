"""Command-line host for the arena.

Reads ``name@team`` lines from stdin until EOF, prints the rosters, runs
the arena while narrating every event, then prints the final rosters and
the winning team.

Example:
    $ printf 'Alice@red\\nBob@blue\\n' | gamerena --seed 7
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from gamerena.core.config import get_settings
from gamerena.core.exceptions import GamerenaError
from gamerena.core.logging import bind_context, clear_context, configure_logging, get_logger
from gamerena.engine.arena import Arena
from gamerena.host.parsing import parse_entry
from gamerena.host.report import render_event, render_teams


logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gamerena",
        description="Multi-team turn-based arena. Reads name@team lines from stdin.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed of the combat random source.")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Logging level (default from GAMERENA_LOG_LEVEL).",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines on stderr.")
    parser.add_argument("--max-turns", type=int, default=None, help="Stop after this many turns.")
    parser.add_argument("--quiet", action="store_true", help="Do not narrate individual turns.")
    return parser


def read_roster(arena: Arena, lines: TextIO, out: TextIO) -> int:
    """Register every roster line with ``arena``.

    Malformed or duplicate lines are reported and skipped.

    Returns:
        Number of entities registered.
    """
    registered = 0
    for line in lines:
        if not line.strip():
            continue
        try:
            entry = parse_entry(line)
            if entry.is_command:
                print("Command mode is not supported.", file=out)
                continue
            arena.register(entry.team_name, entry.name)
        except GamerenaError as exc:
            print(exc.message, file=out)
            logger.debug("Roster line rejected", line=line.rstrip("\r\n"), error=str(exc))
            continue
        registered += 1
        print(f"Name: {entry.name}, Team: {entry.team_name}.", file=out)
    return registered


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run the arena host.

    Args:
        argv: Command-line arguments, ``sys.argv[1:]`` when omitted.
        stdin: Roster source, ``sys.stdin`` when omitted.
        stdout: Narration sink, ``sys.stdout`` when omitted.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_turns is not None and args.max_turns < 1:
        parser.error("--max-turns must be at least 1")

    lines = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout

    try:
        settings = get_settings()
    except GamerenaError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    configure_logging(
        level=args.log_level or settings.log_level,
        json_format=args.json_logs or settings.json_logs,
    )

    overrides: dict[str, object] = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.max_turns is not None:
        overrides["max_turns"] = args.max_turns
    if overrides:
        settings = settings.model_copy(update=overrides)

    arena = Arena(settings)
    bind_context(seed=arena.seed)
    try:
        return _play(arena, args, lines, out)
    finally:
        clear_context()


def _play(arena: Arena, args: argparse.Namespace, lines: TextIO, out: TextIO) -> int:
    if read_roster(arena, lines, out) == 0:
        print("No participants.", file=out)
        return 1

    print(render_teams(arena, level=1), file=out)
    if not args.quiet:
        arena.subscribe(lambda event: print(render_event(event), file=out))

    report = arena.run()

    print(render_teams(arena, level=2), file=out)
    if report.winning_team_name is not None:
        print(f"Winner: {report.winning_team_name}", file=out)
    else:
        print("No winner.", file=out)
    if report.aborted:
        print(f"Stopped after {report.turns} turns.", file=out)
    print("Done...", file=out)
    return 0


__all__ = [
    "build_parser",
    "read_roster",
    "main",
]
