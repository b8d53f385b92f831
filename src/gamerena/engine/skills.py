"""Weighted skill selection and skill-table generation.

Every entity carries two baseline skills (strike and spell) whose weights
lean towards its stronger offense stat. Bonus skills are added only when
their weight, a fixed linear formula over the entity's stats, clears a
per-skill threshold.
"""

from __future__ import annotations

from typing import Iterable

from gamerena.core.exceptions import InvalidArgumentError, PreconditionViolatedError
from gamerena.engine.rng import RandomSource
from gamerena.models.blueprint import SkillEntry, SkillKind, TargetClass
from gamerena.models.stats import StatBlock


BASELINE_WEIGHT = 250
BASELINE_SKEW = 4
MIN_WEIGHT = 1

FIREBALL_THRESHOLD = 140
CRITICAL_THRESHOLD = 125
CURE_THRESHOLD = 100


class SkillSelector:
    """Weighted-random choice over an ordered skill table.

    Example:
        >>> selector = SkillSelector()
        >>> entry = selector.add_skill(SkillKind.STRIKE, TargetClass.ENEMY, 3)
        >>> selector.total_weight
        3
    """

    def __init__(self) -> None:
        self._skills: list[SkillEntry] = []
        self._total_weight = 0

    @classmethod
    def from_entries(cls, entries: Iterable[SkillEntry]) -> "SkillSelector":
        selector = cls()
        for entry in entries:
            selector.add_entry(entry)
        return selector

    @property
    def total_weight(self) -> int:
        return self._total_weight

    @property
    def skills(self) -> tuple[SkillEntry, ...]:
        return tuple(self._skills)

    def __len__(self) -> int:
        return len(self._skills)

    def add_skill(self, kind: SkillKind | str, target: TargetClass | str, weight: int) -> SkillEntry:
        """Register a skill at the end of the table.

        Args:
            kind: The skill action.
            target: Ally or enemy targeting.
            weight: Relative selection weight.

        Returns:
            The registered entry.

        Raises:
            InvalidArgumentError: If the weight is not positive or the
                kind/target is unknown.
        """
        if weight <= 0:
            raise InvalidArgumentError(
                "Skill weight must be positive",
                field_name="weight",
                invalid_value=weight,
            )
        try:
            entry = SkillEntry(kind=SkillKind(kind), target=TargetClass(target), weight=weight)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Unknown skill or target: {exc}",
                field_name="kind",
                invalid_value=str(kind),
            ) from exc
        self.add_entry(entry)
        return entry

    def add_entry(self, entry: SkillEntry) -> None:
        self._skills.append(entry)
        self._total_weight += entry.weight

    def pick(self, rng: RandomSource) -> SkillEntry:
        """Draw one skill with probability proportional to its weight.

        Raises:
            PreconditionViolatedError: If no skill has been registered.
        """
        if not self._skills:
            raise PreconditionViolatedError("No skills registered")

        k = rng.below(self._total_weight)
        for entry in self._skills:
            if k < entry.weight:
                return entry
            k -= entry.weight
        return self._skills[-1]

    def find(self, kind: SkillKind | str) -> SkillEntry | None:
        """Look up a skill by kind, for invoking a named action."""
        for entry in self._skills:
            if entry.kind == kind:
                return entry
        return None


def build_skill_table(stats: StatBlock, rng: RandomSource) -> tuple[SkillEntry, ...]:
    """Derive a skill table from an entity's base stats.

    Args:
        stats: Base stats of the owning blueprint.
        rng: The blueprint's name-seeded source (two draws are consumed).

    Returns:
        Ordered skill entries; strike and spell always come first.
    """
    attack = stats.attack
    magic = stats.magic
    intelligence = stats.intelligence

    strike_weight = int(BASELINE_WEIGHT + (attack - magic) * BASELINE_SKEW * (0.5 + rng.random()))
    spell_weight = int(BASELINE_WEIGHT + (magic - attack) * BASELINE_SKEW * (0.5 + rng.random()))
    fireball_weight = 50 + (intelligence // 2) + magic
    critical_weight = 30 + (intelligence // 4) + (attack // 2) + (stats.accuracy // 2)
    cure_weight = 60 + (intelligence // 2) + (magic // 4)

    entries = [
        SkillEntry(kind=SkillKind.STRIKE, target=TargetClass.ENEMY, weight=max(strike_weight, MIN_WEIGHT)),
        SkillEntry(kind=SkillKind.SPELL, target=TargetClass.ENEMY, weight=max(spell_weight, MIN_WEIGHT)),
    ]
    if fireball_weight > FIREBALL_THRESHOLD:
        entries.append(SkillEntry(kind=SkillKind.FIREBALL, target=TargetClass.ENEMY, weight=fireball_weight))
    if critical_weight > CRITICAL_THRESHOLD:
        entries.append(SkillEntry(kind=SkillKind.CRITICAL, target=TargetClass.ENEMY, weight=critical_weight))
    if cure_weight > CURE_THRESHOLD:
        entries.append(SkillEntry(kind=SkillKind.CURE, target=TargetClass.ALLY, weight=cure_weight))
    return tuple(entries)


__all__ = [
    "SkillSelector",
    "build_skill_table",
    "BASELINE_WEIGHT",
    "FIREBALL_THRESHOLD",
    "CRITICAL_THRESHOLD",
    "CURE_THRESHOLD",
]
