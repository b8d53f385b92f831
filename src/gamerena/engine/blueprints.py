"""Name-seeded blueprint generation."""

from __future__ import annotations

from gamerena.core.config import BlueprintSettings, get_settings
from gamerena.core.logging import get_logger
from gamerena.engine.rng import RandomSource, team_id_for
from gamerena.engine.skills import build_skill_table
from gamerena.models.blueprint import Blueprint
from gamerena.models.stats import Stat, StatBlock


logger = get_logger(__name__)


def generate_blueprint(
    team_name: str,
    name: str,
    *,
    settings: BlueprintSettings | None = None,
) -> Blueprint:
    """Build the blueprint for a named entity.

    The same name always yields the same stats and skill table, whatever
    the team and whatever else has been drawn during the run.

    Args:
        team_name: Owning team.
        name: Entity name, also the seed of its stats.
        settings: Stat ranges; the global settings are used when omitted.

    Returns:
        The generated Blueprint.
    """
    cfg = settings or get_settings().blueprint
    rng = RandomSource.for_name(name)

    # Draw order follows the Stat enumeration: HP first, Intelligence last
    values: dict[str, int] = {}
    for stat in Stat:
        if stat is Stat.HP:
            values[stat.value] = rng.between(cfg.hp_min, cfg.hp_max)
        else:
            values[stat.value] = rng.between(cfg.stat_min, cfg.stat_max)
    stats = StatBlock(**values)

    blueprint = Blueprint(
        name=name,
        team_name=team_name,
        team_id=team_id_for(team_name),
        stats=stats,
        skills=build_skill_table(stats, rng),
    )
    logger.debug(
        "Blueprint generated",
        entity=name,
        team=team_name,
        hp=stats.hp,
        skills=[entry.kind.value for entry in blueprint.skills],
    )
    return blueprint


__all__ = ["generate_blueprint"]
