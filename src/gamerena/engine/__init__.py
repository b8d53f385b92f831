"""Simulation engine for the Gamerena arena.

Submodules:
    rng: Name-seeded and per-run random sources.
    blueprints: Deterministic blueprint generation from a name.
    skills: Weighted skill selection and skill-table generation.
    combat: Damage and heal resolution, CombatEvent.
    targeting: Team-partitioned ally/enemy selection.
    scheduler: Readiness-clock min-heap turn order.
    arena: The orchestrator tying everything together.

Example:
    >>> from gamerena.engine import Arena
    >>>
    >>> arena = Arena()
    >>> arena.register("red", "Alice")
    >>> arena.register("blue", "Bob")
    >>> report = arena.run()
    >>> print(report.winning_team_name)
"""

from __future__ import annotations

from gamerena.engine.arena import Arena, BlueprintFactory, EventListener, TerminationReport
from gamerena.engine.blueprints import generate_blueprint
from gamerena.engine.combat import (
    CombatEvent,
    Outcome,
    dodge_chance,
    perform_skill,
    resolve_damage,
    resolve_heal,
)
from gamerena.engine.rng import RandomSource, name_seed, team_id_for
from gamerena.engine.scheduler import Scheduler
from gamerena.engine.skills import SkillSelector, build_skill_table
from gamerena.engine.targeting import TargetSelector


__all__ = [
    # Random
    "RandomSource",
    "name_seed",
    "team_id_for",
    # Generation
    "generate_blueprint",
    "SkillSelector",
    "build_skill_table",
    # Combat
    "Outcome",
    "CombatEvent",
    "dodge_chance",
    "resolve_damage",
    "resolve_heal",
    "perform_skill",
    # Orchestration
    "TargetSelector",
    "Scheduler",
    "Arena",
    "BlueprintFactory",
    "EventListener",
    "TerminationReport",
]
