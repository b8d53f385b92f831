"""Data models for the Gamerena arena simulator.

Immutable values (StatBlock, Modifier, SkillEntry, Blueprint) are pydantic
models; per-turn mutable state (RuntimeState) is a plain dataclass.
"""

from __future__ import annotations

from gamerena.models.blueprint import Blueprint, SkillEntry, SkillKind, TargetClass
from gamerena.models.entity import Entity
from gamerena.models.state import AppliedModifier, DeactivationHandler, RuntimeState
from gamerena.models.stats import (
    STAT_FLOORS,
    Modifier,
    Stat,
    StatBlock,
    apply_modifier,
    effective_stats,
)


__all__ = [
    # Stats
    "Stat",
    "STAT_FLOORS",
    "StatBlock",
    "Modifier",
    "apply_modifier",
    "effective_stats",
    # Blueprint
    "TargetClass",
    "SkillKind",
    "SkillEntry",
    "Blueprint",
    # State
    "AppliedModifier",
    "DeactivationHandler",
    "RuntimeState",
    "Entity",
]
