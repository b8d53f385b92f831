"""Stat blocks, modifiers and effective-stat folding.

A StatBlock is an immutable value. Effective stats are never stored: they
are recomputed by folding every attached Modifier over a copy of the base
block, clamping after each modifier rather than once at the end.
"""

from __future__ import annotations

from enum import StrEnum
from functools import reduce
from typing import Annotated, Iterable

from pydantic import BaseModel, ConfigDict, Field


class Stat(StrEnum):
    """The eight stats carried by every participant."""

    HP = "hp"
    ATTACK = "attack"
    DEFENSE = "defense"
    MAGIC = "magic"
    MAGIC_DEFENSE = "magic_defense"
    SPEED = "speed"
    ACCURACY = "accuracy"
    INTELLIGENCE = "intelligence"


# Floors applied when a modifier is folded into a stat block.
# Defense, MagicDefense and Speed are unconstrained.
STAT_FLOORS: dict[Stat, int] = {
    Stat.HP: 1,
    Stat.ATTACK: 0,
    Stat.MAGIC: 0,
    Stat.ACCURACY: 5,
    Stat.INTELLIGENCE: 0,
}


class StatBlock(BaseModel):
    """Immutable block of the eight stats.

    Example:
        >>> block = StatBlock(hp=250, attack=60, defense=40, magic=50,
        ...                   magic_defense=45, speed=70, accuracy=55,
        ...                   intelligence=65)
        >>> block[Stat.SPEED]
        70
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    hp: int
    attack: int
    defense: int
    magic: int
    magic_defense: int
    speed: int
    accuracy: int
    intelligence: int

    def __getitem__(self, stat: Stat) -> int:
        return getattr(self, stat.value)


StatDelta = Annotated[int, Field(description="Signed additive delta")]


class Modifier(BaseModel):
    """Timed additive stat delta.

    Attributes:
        name: Label used to remove the modifier later (may be empty).
        hp: Delta to max HP; also applied once to current HP on attach.
        attack: Delta to Attack.
        defense: Delta to Defense.
        magic: Delta to Magic.
        magic_defense: Delta to MagicDefense.
        speed: Delta to Speed.
        accuracy: Delta to Accuracy.
        intelligence: Delta to Intelligence.
        max_rounds: Owner turns before expiry, -1 for unlimited.
        max_ticks: Clock ticks before expiry, -1 for unlimited.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(default="", max_length=100)
    hp: StatDelta = 0
    attack: StatDelta = 0
    defense: StatDelta = 0
    magic: StatDelta = 0
    magic_defense: StatDelta = 0
    speed: StatDelta = 0
    accuracy: StatDelta = 0
    intelligence: StatDelta = 0
    max_rounds: int = Field(default=-1, ge=-1)
    max_ticks: int = Field(default=-1, ge=-1)

    def delta(self, stat: Stat) -> int:
        return getattr(self, stat.value)

    @property
    def is_permanent(self) -> bool:
        return self.max_rounds < 0 and self.max_ticks < 0


def apply_modifier(stats: StatBlock, modifier: Modifier) -> StatBlock:
    """Add one modifier's deltas to a stat block and clamp to the floors.

    Args:
        stats: The block to modify (left untouched).
        modifier: The modifier to apply.

    Returns:
        A new StatBlock.
    """
    update: dict[str, int] = {}
    for stat in Stat:
        value = stats[stat] + modifier.delta(stat)
        floor = STAT_FLOORS.get(stat)
        if floor is not None:
            value = max(value, floor)
        update[stat.value] = value
    return stats.model_copy(update=update)


def effective_stats(stats: StatBlock, modifiers: Iterable[Modifier]) -> StatBlock:
    """Fold modifiers, in order, over a base stat block."""
    return reduce(apply_modifier, modifiers, stats)


__all__ = [
    "Stat",
    "STAT_FLOORS",
    "StatBlock",
    "Modifier",
    "apply_modifier",
    "effective_stats",
]
