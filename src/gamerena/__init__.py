"""Gamerena - multi-team turn-based arena simulator.

Entities are generated deterministically from their names, queue on a
readiness clock, and pick weighted-random skills against random allies or
enemies until a single team is left standing.

DESIGN:
- The core (models, engine) never performs I/O
- All numeric tuning lives in pydantic-settings (``GAMERENA_*`` env vars)
- Randomness is injectable: name-seeded sources for blueprints, a per-run
  source for combat

Example:
    >>> from gamerena import Arena
    >>>
    >>> arena = Arena()
    >>> arena.register("red", "Alice")
    >>> arena.register("red", "Carol")
    >>> arena.register("blue", "Bob")
    >>> report = arena.run()
    >>> print(report.winning_team_name, report.turns)

Modules:
    core: Configuration, logging, and base exceptions.
    models: Stats, modifiers, blueprints and runtime state.
    engine: Random sources, skills, combat, targeting, scheduler, arena.
    host: Roster parsing, text rendering and the command-line entry point.
"""

from __future__ import annotations

# Core
from gamerena.core.config import Settings, get_settings
from gamerena.core.exceptions import (
    DuplicateRegistrationError,
    GamerenaError,
    InvalidArgumentError,
    PreconditionViolatedError,
)
from gamerena.core.logging import configure_logging, get_logger

# Engine
from gamerena.engine.arena import Arena, TerminationReport
from gamerena.engine.combat import CombatEvent, Outcome
from gamerena.engine.rng import RandomSource

# Models
from gamerena.models import (
    Blueprint,
    Entity,
    Modifier,
    SkillEntry,
    SkillKind,
    Stat,
    StatBlock,
    TargetClass,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "GamerenaError",
    "InvalidArgumentError",
    "DuplicateRegistrationError",
    "PreconditionViolatedError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Stat",
    "StatBlock",
    "Modifier",
    "SkillKind",
    "TargetClass",
    "SkillEntry",
    "Blueprint",
    "Entity",
    # Engine
    "RandomSource",
    "Outcome",
    "CombatEvent",
    "Arena",
    "TerminationReport",
]
