"""Combat resolution: damage and heal shapes.

Every concrete skill is one of two resolution shapes, parameterised by its
profile in CombatSettings:

- damage: dodge roll from the Accuracy and defense gaps, then a damage
  roll floored at 1; the actor scores the damage plus a kill bonus when
  the hit knocks the target out;
- heal: a heal roll floored at 1 and capped at the target's missing HP;
  the actor scores the HP actually restored.

All formulas are total over integer stats; nothing here raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from gamerena.core.config import CombatSettings, DamageProfile, HealProfile
from gamerena.core.logging import get_logger
from gamerena.engine.rng import RandomSource
from gamerena.models.blueprint import SkillKind
from gamerena.models.entity import Entity


logger = get_logger(__name__)


class Outcome(StrEnum):
    """How a single skill use resolved."""

    HIT = "hit"
    DODGED = "dodged"
    HEALED = "healed"
    IGNORED = "ignored"
    """Target was already inactive; nothing changed."""


@dataclass(frozen=True)
class CombatEvent:
    """Record of one resolved skill use.

    Attributes:
        actor: Name of the acting entity.
        target: Name of the targeted entity.
        skill: Skill that was used.
        outcome: Resolution outcome.
        amount: Damage dealt or HP restored.
        killed: Whether this use knocked the target out.
        target_hp: Target HP after resolution.
        target_max_hp: Target effective max HP after resolution.
        time: Simulation clock at resolution.
    """

    actor: str
    target: str
    skill: SkillKind
    outcome: Outcome
    amount: int = 0
    killed: bool = False
    target_hp: int = 0
    target_max_hp: int = 0
    time: int = 0


def _truncated(numerator: int, divisor: int) -> int:
    return int(numerator / divisor)


def dodge_chance(actor: Entity, target: Entity, profile: DamageProfile) -> int:
    """Dodge chance in percent for ``target`` against ``actor``'s skill."""
    a = actor.effective_stats()
    t = target.effective_stats()
    if profile.kind == "physical":
        offense, defense = a.attack, t.defense
    else:
        offense, defense = a.magic, t.magic_defense

    chance = (
        profile.dodge_base
        + _truncated(t.accuracy - a.accuracy, profile.accuracy_divisor)
        + _truncated(defense - offense, profile.defense_divisor)
    )
    if profile.intelligence_divisor:
        chance -= _truncated(a.intelligence, profile.intelligence_divisor)
    return chance


def _event(
    actor: Entity,
    target: Entity,
    skill: SkillKind,
    outcome: Outcome,
    *,
    amount: int = 0,
    killed: bool = False,
    time: int = 0,
) -> CombatEvent:
    return CombatEvent(
        actor=actor.name,
        target=target.name,
        skill=skill,
        outcome=outcome,
        amount=amount,
        killed=killed,
        target_hp=target.hp,
        target_max_hp=target.max_hp,
        time=time,
    )


def resolve_damage(
    actor: Entity,
    target: Entity,
    profile: DamageProfile,
    rng: RandomSource,
    *,
    kill_bonus: int,
    skill: SkillKind = SkillKind.STRIKE,
    time: int = 0,
) -> CombatEvent:
    """Resolve a damage-dealing skill.

    Args:
        actor: The attacking entity.
        target: The defending entity.
        profile: Constants of the skill.
        rng: Combat random source.
        kill_bonus: Score bonus for knocking the target out.
        skill: Skill being resolved, for the event record.
        time: Current simulation clock.

    Returns:
        The resulting CombatEvent.
    """
    if not target.active:
        return _event(actor, target, skill, Outcome.IGNORED, time=time)

    if rng.below(100) < dodge_chance(actor, target, profile):
        logger.debug("Attack dodged", actor=actor.name, target=target.name, skill=skill.value)
        return _event(actor, target, skill, Outcome.DODGED, time=time)

    a = actor.effective_stats()
    t = target.effective_stats()
    if profile.kind == "physical":
        offense, defense = a.attack, t.defense
    else:
        offense, defense = a.magic, t.magic_defense

    raw = (
        profile.base
        + offense * profile.offense_flat
        + offense * profile.offense_random * rng.random()
        - defense * profile.defense_flat
        - defense * profile.defense_random * rng.random()
        + a.intelligence * profile.intelligence_scale
    )
    damage = max(1, int(raw * profile.factor))

    actor.state.score += damage
    killed = target.state.take_damage(damage)
    if killed:
        actor.state.score += kill_bonus
        logger.info("Entity defeated", target=target.name, by=actor.name, skill=skill.value)

    return _event(actor, target, skill, Outcome.HIT, amount=damage, killed=killed, time=time)


def resolve_heal(
    actor: Entity,
    target: Entity,
    profile: HealProfile,
    rng: RandomSource,
    *,
    skill: SkillKind = SkillKind.CURE,
    time: int = 0,
) -> CombatEvent:
    """Resolve a healing skill.

    The heal never lifts the target above its effective max HP, so a
    target already at full HP receives nothing.
    """
    if not target.active:
        return _event(actor, target, skill, Outcome.IGNORED, time=time)

    a = actor.effective_stats()
    raw = (
        profile.base
        + a.magic * profile.magic_flat
        + a.magic * profile.magic_random * rng.random()
        + a.intelligence * profile.intelligence_scale
    )
    heal = max(1, int(raw * profile.factor))
    heal = min(heal, max(target.max_hp - target.hp, 0))

    restored = target.state.restore(heal)
    actor.state.score += restored
    return _event(actor, target, skill, Outcome.HEALED, amount=restored, time=time)


def perform_skill(
    kind: SkillKind,
    actor: Entity,
    target: Entity,
    rng: RandomSource,
    settings: CombatSettings,
    *,
    time: int = 0,
) -> CombatEvent:
    """Dispatch a skill to its resolution shape using its configured profile."""
    skill = SkillKind(kind)
    profile = getattr(settings, skill.value)
    if isinstance(profile, HealProfile):
        return resolve_heal(actor, target, profile, rng, skill=skill, time=time)
    return resolve_damage(
        actor,
        target,
        profile,
        rng,
        kill_bonus=settings.kill_bonus,
        skill=skill,
        time=time,
    )


__all__ = [
    "Outcome",
    "CombatEvent",
    "dodge_chance",
    "resolve_damage",
    "resolve_heal",
    "perform_skill",
]
