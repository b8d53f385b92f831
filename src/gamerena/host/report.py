"""Plain-text rendering of rosters and combat events."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gamerena.engine.combat import CombatEvent, Outcome
from gamerena.models.blueprint import SkillKind
from gamerena.models.entity import Entity


if TYPE_CHECKING:
    from gamerena.engine.arena import Arena


HP_PER_CELL = 20
FILLED_CELL = "#"
EMPTY_CELL = "."
DEFEATED_MARKER = "+-| defeated"

SKILL_VERBS: dict[SkillKind, str] = {
    SkillKind.STRIKE: "attacks",
    SkillKind.SPELL: "casts a spell at",
    SkillKind.FIREBALL: "hurls a fireball at",
    SkillKind.CRITICAL: "aims for a weak spot of",
    SkillKind.CURE: "casts cure on",
}


def _cells(hp: int) -> int:
    return (max(hp, 0) + HP_PER_CELL // 2) // HP_PER_CELL


def health_bar(hp: int, max_hp: int) -> str:
    """Render ``<###...>`` with one cell per 20 HP, rounded to the nearest cell."""
    filled = _cells(hp)
    total = max(_cells(max_hp), filled)
    return "<" + FILLED_CELL * filled + EMPTY_CELL * (total - filled) + ">"


def render_entity(entity: Entity, indent: int = 0, level: int = 0) -> str:
    """Render one entity as a block of lines.

    Args:
        entity: The entity to render.
        indent: Number of spaces in front of every line.
        level: 0 for the HP line only, 1 adds the stat lines, 2 adds the score.

    Returns:
        The rendered block, without a trailing newline.
    """
    pad = " " * indent
    stats = entity.effective_stats()
    lines = [
        f"{pad}Name: {entity.name}  HP: {entity.hp} / {stats.hp}  "
        f"{health_bar(entity.hp, stats.hp)}"
    ]
    if level > 1:
        lines.append(f"{pad}Score: {entity.score}")
    if not entity.active:
        lines.append(f"{pad}{DEFEATED_MARKER}")
        return "\n".join(lines)
    if level > 0:
        lines.append(
            f"{pad}Atk: {stats.attack}\tDef: {stats.defense}\t\tAcc: {stats.accuracy}"
        )
        lines.append(
            f"{pad}Mag: {stats.magic}\tMagDef: {stats.magic_defense}"
            f"\tSpd: {stats.speed}\tInt: {stats.intelligence}"
        )
    return "\n".join(lines)


def render_teams(arena: Arena, level: int = 0) -> str:
    """Render every team and its members in registration order."""
    names = arena.team_names()
    blocks: list[str] = []
    for team_id, members in arena.teams().items():
        blocks.append(f"Team: {names[team_id]}")
        for entity in members:
            blocks.append(render_entity(entity, indent=2, level=level))
            blocks.append("")
    return "\n".join(blocks)


def render_event(event: CombatEvent) -> str:
    """Narrate one combat event in a line or two."""
    verb = SKILL_VERBS.get(event.skill, event.skill.value)
    if event.outcome is Outcome.DODGED:
        return f"{event.actor} {verb} {event.target}, but {event.target} dodged."
    if event.outcome is Outcome.IGNORED:
        return f"{event.actor} {verb} {event.target}, who is already down."
    if event.outcome is Outcome.HEALED:
        return f"{event.actor} {verb} {event.target}: {event.target} recovers {event.amount} HP."

    text = f"{event.actor} {verb} {event.target} for {event.amount} damage."
    if event.killed:
        text += f"\n{event.target} was defeated by {event.actor}."
    return text


__all__ = [
    "SKILL_VERBS",
    "health_bar",
    "render_entity",
    "render_teams",
    "render_event",
]
