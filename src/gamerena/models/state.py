"""Mutable per-entity battle state.

RuntimeState is owned by exactly one Entity and is mutated by combat
resolution (HP, score), the scheduler (readiness time) and modifier
attachment. It carries no stats of its own: effective stats are always
recomputed from the Blueprint plus ``modifiers``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable

from gamerena.core.exceptions import InvalidArgumentError
from gamerena.core.logging import get_logger
from gamerena.models.blueprint import Blueprint
from gamerena.models.stats import Modifier


logger = get_logger(__name__)

DeactivationHandler = Callable[["RuntimeState"], None]


@dataclass
class AppliedModifier:
    """A modifier attached to a state, with its elapsed-time counters.

    Attributes:
        modifier: The attached modifier.
        attached_at: Simulation clock value at attach time.
        rounds: Owner turns completed since attach.
        ticks: Clock ticks elapsed since attach.
    """

    modifier: Modifier
    attached_at: int = 0
    rounds: int = 0
    ticks: int = 0

    @property
    def expired(self) -> bool:
        budget = self.modifier
        if budget.max_rounds >= 0 and self.rounds >= budget.max_rounds:
            return True
        return budget.max_ticks >= 0 and self.ticks >= budget.max_ticks


@dataclass
class RuntimeState:
    """Mutable battle state of one entity.

    Attributes:
        hp: Current hit points.
        team_id: Copy of the Blueprint's team id.
        active: False once the entity has been knocked out.
        score: Damage dealt and healing done, plus kill bonuses.
        readiness_time: Clock value of the entity's next turn.
        modifiers: Attached modifiers in insertion order.
        on_deactivate: Callbacks run once when the entity deactivates.
    """

    hp: int
    team_id: int
    active: bool = True
    score: int = 0
    readiness_time: int = 0
    modifiers: list[AppliedModifier] = field(default_factory=list)
    on_deactivate: list[DeactivationHandler] = field(default_factory=list)

    @classmethod
    def from_blueprint(cls, blueprint: Blueprint) -> "RuntimeState":
        return cls(hp=blueprint.stats.hp, team_id=blueprint.team_id)

    @property
    def active_modifiers(self) -> list[Modifier]:
        return [applied.modifier for applied in self.modifiers]

    def add_modifier(self, modifier: Modifier, *, now: int = 0) -> AppliedModifier:
        """Attach a modifier and apply its HP delta to current HP.

        Args:
            modifier: The modifier to attach.
            now: Current simulation clock, used for tick budgets.

        Returns:
            The attached record.

        Raises:
            InvalidArgumentError: If ``modifier`` is None or not a Modifier.
        """
        if not isinstance(modifier, Modifier):
            raise InvalidArgumentError(
                "invalid modifier",
                field_name="modifier",
                invalid_value=type(modifier).__name__,
            )

        applied = AppliedModifier(modifier=modifier, attached_at=now)
        self.modifiers.append(applied)

        if modifier.hp and self.active:
            self.hp = max(self.hp + modifier.hp, 0)
            if self.hp == 0:
                self.deactivate()
        return applied

    def remove_modifier(self, name: str) -> int:
        """Detach every modifier with the given name.

        Returns:
            Number of modifiers removed.
        """
        kept = [applied for applied in self.modifiers if applied.modifier.name != name]
        removed = len(self.modifiers) - len(kept)
        self.modifiers = kept
        return removed

    def advance_modifiers(self, now: int) -> list[Modifier]:
        """Count one owner turn against every modifier and drop expired ones.

        Args:
            now: Current simulation clock.

        Returns:
            The modifiers that expired.
        """
        expired: list[Modifier] = []
        kept: list[AppliedModifier] = []
        for applied in self.modifiers:
            applied.rounds += 1
            applied.ticks = now - applied.attached_at
            if applied.expired:
                expired.append(applied.modifier)
            else:
                kept.append(applied)
        self.modifiers = kept
        return expired

    def take_damage(self, amount: int) -> bool:
        """Subtract damage from HP, clamped at zero.

        Damage to an inactive state is ignored.

        Returns:
            True only for the call that deactivated the state.
        """
        if not self.active:
            return False
        self.hp = max(self.hp - amount, 0)
        if self.hp == 0:
            self.deactivate()
            return True
        return False

    def restore(self, amount: int) -> int:
        """Add HP to an active state; returns the amount applied."""
        if not self.active or amount <= 0:
            return 0
        self.hp += amount
        return amount

    def deactivate(self) -> None:
        """Mark the state inactive and notify listeners exactly once."""
        if not self.active:
            return
        self.active = False
        logger.debug("State deactivated", team_id=self.team_id, score=self.score)
        for handler in list(self.on_deactivate):
            handler(self)

    def copy(self) -> "RuntimeState":
        """Copy for a cloned entity: modifiers are duplicated, callbacks are not."""
        return replace(
            self,
            modifiers=[replace(applied) for applied in self.modifiers],
            on_deactivate=[],
        )


__all__ = [
    "AppliedModifier",
    "DeactivationHandler",
    "RuntimeState",
]
