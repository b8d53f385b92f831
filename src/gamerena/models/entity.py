"""Entity: one shared Blueprint plus one owned RuntimeState.

Entities are the handles the arena hands back to its callers. All
accessors read live state; ``effective_stats`` is recomputed on every call
so a stale snapshot is never observed.
"""

from __future__ import annotations

from gamerena.models.blueprint import Blueprint
from gamerena.models.state import RuntimeState
from gamerena.models.stats import Modifier, StatBlock, effective_stats


class Entity:
    """A participant in the arena.

    Example:
        >>> entity = Entity(blueprint)
        >>> entity.hp == entity.max_hp
        True
    """

    def __init__(self, blueprint: Blueprint, state: RuntimeState | None = None) -> None:
        """Initialize the entity.

        Args:
            blueprint: Shared, immutable template.
            state: Existing state to adopt; a fresh one is built when omitted.
        """
        self._blueprint = blueprint
        self._state = state if state is not None else RuntimeState.from_blueprint(blueprint)

    @property
    def blueprint(self) -> Blueprint:
        return self._blueprint

    @property
    def state(self) -> RuntimeState:
        return self._state

    @property
    def name(self) -> str:
        return self._blueprint.name

    @property
    def team_id(self) -> int:
        return self._blueprint.team_id

    @property
    def team_name(self) -> str:
        return self._blueprint.team_name

    @property
    def hp(self) -> int:
        return self._state.hp

    @property
    def max_hp(self) -> int:
        return self.effective_stats().hp

    @property
    def active(self) -> bool:
        return self._state.active

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def readiness_time(self) -> int:
        return self._state.readiness_time

    @property
    def base_stats(self) -> StatBlock:
        return self._blueprint.stats

    def effective_stats(self) -> StatBlock:
        """Base stats with every attached modifier folded in."""
        return effective_stats(self._blueprint.stats, self._state.active_modifiers)

    def add_modifier(self, modifier: Modifier, *, now: int = 0) -> None:
        self._state.add_modifier(modifier, now=now)

    def remove_modifier(self, name: str) -> int:
        removed = self._state.remove_modifier(name)
        self._clamp_hp()
        return removed

    def expire_modifiers(self, now: int) -> list[Modifier]:
        expired = self._state.advance_modifiers(now)
        if expired:
            self._clamp_hp()
        return expired

    def _clamp_hp(self) -> None:
        # A dropped +HP modifier must not leave current HP above the new max
        self._state.hp = min(self._state.hp, self.max_hp)

    def clone(self) -> "Entity":
        """Copy sharing the Blueprint but owning a separate state."""
        return Entity(self._blueprint, self._state.copy())

    def __repr__(self) -> str:
        return (
            f"Entity(name={self.name!r}, team={self.team_name!r}, "
            f"hp={self.hp}, active={self.active})"
        )


__all__ = ["Entity"]
