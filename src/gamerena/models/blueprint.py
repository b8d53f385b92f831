"""Blueprint models: the immutable template behind every participant.

A Blueprint is built once per named entity and may be shared by clones of
that entity. Nothing in it changes after construction; stat changes only
ever appear in views computed from it.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from gamerena.models.stats import StatBlock


NAME_MAX_LENGTH = 100


class TargetClass(StrEnum):
    """Which side of the arena a skill is aimed at."""

    ALLY = "ally"
    ENEMY = "enemy"


class SkillKind(StrEnum):
    """Registered skill actions."""

    STRIKE = "strike"
    SPELL = "spell"
    FIREBALL = "fireball"
    CRITICAL = "critical"
    CURE = "cure"


class SkillEntry(BaseModel):
    """One row of a skill table.

    Attributes:
        kind: The action to invoke.
        target: Ally or enemy targeting.
        weight: Relative selection weight (strictly positive).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: SkillKind
    target: TargetClass
    weight: int = Field(gt=0)


class Blueprint(BaseModel):
    """Immutable stat and skill template for a named entity.

    Attributes:
        name: Entity name, unique within an arena.
        team_name: Name of the owning team.
        team_id: Stable identifier derived from ``team_name``.
        stats: Base stats.
        skills: Ordered skill table; never empty.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    team_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    team_id: int
    stats: StatBlock
    skills: tuple[SkillEntry, ...] = Field(min_length=1)


__all__ = [
    "NAME_MAX_LENGTH",
    "TargetClass",
    "SkillKind",
    "SkillEntry",
    "Blueprint",
]
