"""Arena orchestrator.

The Arena owns every registered entity and wires the Scheduler and the
TargetSelector together. One scheduler step is one complete turn:

    skill pick -> target pick -> resolution -> score/HP change
    -> possible deactivation -> modifier expiry -> reschedule

The run ends once fewer than two teams are active, when ``abort`` is
called, or when the configured turn cap is reached.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable

from gamerena.core.config import Settings, get_settings
from gamerena.core.exceptions import (
    DuplicateRegistrationError,
    InvalidArgumentError,
    PreconditionViolatedError,
)
from gamerena.core.logging import get_logger
from gamerena.engine.blueprints import generate_blueprint
from gamerena.engine.combat import CombatEvent, perform_skill
from gamerena.engine.rng import RandomSource
from gamerena.engine.scheduler import Scheduler
from gamerena.engine.skills import SkillSelector
from gamerena.engine.targeting import TargetSelector
from gamerena.models.blueprint import (
    NAME_MAX_LENGTH,
    Blueprint,
    SkillEntry,
    SkillKind,
    TargetClass,
)
from gamerena.models.entity import Entity
from gamerena.models.stats import Modifier


logger = get_logger(__name__)

BlueprintFactory = Callable[[str, str], Blueprint]
EventListener = Callable[[CombatEvent], None]


@dataclass(frozen=True)
class TerminationReport:
    """Outcome of ``Arena.run``.

    Attributes:
        winning_team_id: Id of the only team left active, if any.
        winning_team_name: Name of that team.
        turns: Turns played in this run.
        final_time: Simulation clock when the run stopped.
        aborted: True if the run was stopped by ``abort`` or the turn cap.
    """

    winning_team_id: int | None
    winning_team_name: str | None
    turns: int
    final_time: int
    aborted: bool = False


def _validate_name(value: object, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(
            f"{field_name} shouldn't be empty",
            field_name=field_name,
            invalid_value=value,
        )
    if "\n" in value or "\r" in value:
        raise InvalidArgumentError(
            f"Malformed {field_name}",
            field_name=field_name,
            invalid_value=value,
        )
    if len(value) > NAME_MAX_LENGTH:
        raise InvalidArgumentError(
            f"{field_name} is longer than {NAME_MAX_LENGTH} characters",
            field_name=field_name,
            invalid_value=value,
        )
    return value


class Arena:
    """Multi-team turn-based combat arena.

    Example:
        >>> arena = Arena()
        >>> arena.register("red", "Alice")
        >>> arena.register("blue", "Bob")
        >>> report = arena.run()
        >>> report.winning_team_name in {"red", "blue"}
        True
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        rng: RandomSource | None = None,
        blueprint_factory: BlueprintFactory | None = None,
    ) -> None:
        """Initialize the arena.

        Args:
            settings: Arena settings; the global settings when omitted.
            rng: Combat random source; seeded from ``settings.seed`` when omitted.
            blueprint_factory: ``(team_name, name) -> Blueprint``; name-seeded
                generation when omitted.
        """
        self._settings = settings or get_settings()
        self._rng = rng or RandomSource(seed=self._settings.seed)
        self._blueprint_factory = blueprint_factory or partial(
            generate_blueprint,
            settings=self._settings.blueprint,
        )
        self._targets = TargetSelector()
        self._scheduler = Scheduler(
            self._act,
            rng=self._rng,
            settings=self._settings.scheduler,
            on_turn=self._turn_completed,
        )
        self._entities: dict[str, Entity] = {}
        self._selectors: dict[str, SkillSelector] = {}
        self._teams: dict[int, list[Entity]] = {}
        self._team_names: dict[int, str] = {}
        self._events: list[CombatEvent] = []
        self._listeners: list[EventListener] = []
        self._turns = 0
        self._aborted = False

        logger.info("Arena initialized", seed=self._rng.seed, max_turns=self._settings.max_turns)

    # -------------------------------------------------------------------------
    # Read accessors
    # -------------------------------------------------------------------------

    @property
    def entities(self) -> tuple[Entity, ...]:
        return tuple(self._entities.values())

    @property
    def events(self) -> tuple[CombatEvent, ...]:
        return tuple(self._events)

    @property
    def seed(self) -> int | None:
        """Seed of the combat random source, if it was seeded."""
        return self._rng.seed

    @property
    def clock(self) -> int:
        return self._scheduler.clock

    @property
    def turns(self) -> int:
        return self._turns

    @property
    def targets(self) -> TargetSelector:
        return self._targets

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    def get(self, name: str) -> Entity | None:
        return self._entities.get(name)

    def teams(self) -> dict[int, list[Entity]]:
        """Snapshot of every team and its members, in registration order."""
        return {team_id: list(members) for team_id, members in self._teams.items()}

    def team_names(self) -> dict[int, str]:
        return dict(self._team_names)

    def skills_of(self, entity: Entity) -> tuple[SkillEntry, ...]:
        return self._selector_for(entity).skills

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register(self, team_name: str, entity_name: str) -> Entity:
        """Create an entity and enrol it with the scheduler and target selector.

        Args:
            team_name: Owning team.
            entity_name: Unique entity name; also seeds its stats.

        Returns:
            The registered entity.

        Raises:
            InvalidArgumentError: If a name is empty or malformed.
            DuplicateRegistrationError: If the entity name is taken.
        """
        name = _validate_name(entity_name, "entity_name")
        team = _validate_name(team_name, "team_name")
        if name in self._entities:
            raise DuplicateRegistrationError(f'Name "{name}" has been used', name=name)

        blueprint = self._blueprint_factory(team, name)
        selector = SkillSelector.from_entries(blueprint.skills)
        entity = Entity(blueprint)
        entity.state.on_deactivate.append(lambda _state: self._targets.mark_dirty())

        self._entities[name] = entity
        self._selectors[name] = selector
        self._teams.setdefault(blueprint.team_id, []).append(entity)
        self._team_names.setdefault(blueprint.team_id, blueprint.team_name)
        self._scheduler.insert(entity)
        self._targets.add_entity(entity)

        logger.info(
            "Entity registered",
            entity=name,
            team=team,
            hp=blueprint.stats.hp,
            skills=len(selector),
        )
        return entity

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def subscribe(self, listener: EventListener) -> None:
        """Receive every CombatEvent as it is resolved."""
        self._listeners.append(listener)

    def _record(self, event: CombatEvent) -> None:
        self._events.append(event)
        for listener in self._listeners:
            listener(event)

    # -------------------------------------------------------------------------
    # Turn logic
    # -------------------------------------------------------------------------

    def _selector_for(self, entity: Entity) -> SkillSelector:
        selector = self._selectors.get(entity.name)
        if selector is None:
            raise InvalidArgumentError(
                "Entity is not registered in this arena",
                field_name="entity",
                invalid_value=entity.name,
            )
        return selector

    def _resolve(self, entity: Entity, entry: SkillEntry) -> CombatEvent | None:
        if entry.target is TargetClass.ENEMY:
            target = self._targets.random_enemy(entity, self._rng)
        else:
            target = self._targets.random_ally(entity, self._rng)
        if target is None:
            logger.debug("No target available", entity=entity.name, skill=entry.kind.value)
            return None

        event = perform_skill(
            entry.kind,
            entity,
            target,
            self._rng,
            self._settings.combat,
            time=self._scheduler.clock,
        )
        self._record(event)
        return event

    def _act(self, entity: Entity) -> None:
        entry = self._selector_for(entity).pick(self._rng)
        self._resolve(entity, entry)

    def _turn_completed(self, entity: Entity, time: int) -> None:
        logger.debug("Turn completed", entity=entity.name, time=time, hp=entity.hp)

    def perform(self, entity: Entity, kind: SkillKind | str) -> CombatEvent | None:
        """Invoke a named skill from ``entity``'s table outside the turn order.

        Returns:
            The resolved event, or None if no target was available.

        Raises:
            InvalidArgumentError: If the entity is unknown or lacks the skill.
            PreconditionViolatedError: If the entity has been knocked out.
        """
        selector = self._selector_for(entity)
        if not entity.active:
            raise PreconditionViolatedError(
                f"{entity.name} is knocked out", details={"entity": entity.name}
            )
        entry = selector.find(kind)
        if entry is None:
            raise InvalidArgumentError(
                f"{entity.name} has no skill {kind!s}",
                field_name="kind",
                invalid_value=str(kind),
            )
        return self._resolve(entity, entry)

    def apply_modifier(self, entity: Entity, modifier: Modifier) -> None:
        """Attach a modifier, starting its tick budget at the current clock."""
        entity.add_modifier(modifier, now=self._scheduler.clock)
        logger.debug("Modifier attached", entity=entity.name, modifier=modifier.name)

    def step(self) -> Entity | None:
        """Play a single turn; returns the acting entity or None when exhausted."""
        entity = self._scheduler.advance()
        if entity is not None:
            self._turns += 1
        return entity

    def abort(self) -> None:
        """Stop ``run`` before the next turn."""
        self._aborted = True

    def run(self) -> TerminationReport:
        """Drive the scheduler until fewer than two teams remain active.

        Returns:
            TerminationReport naming the winner, if there is one.

        Raises:
            PreconditionViolatedError: If no entity has been registered.
        """
        if not self._entities:
            raise PreconditionViolatedError("no participants")

        max_turns = self._settings.max_turns
        started_at = self._turns
        logger.info(
            "Arena run started",
            participants=len(self._entities),
            teams=self._targets.active_team_count(),
        )

        while self._targets.active_team_count() >= 2:
            if self._aborted:
                logger.info("Arena run aborted", turns=self._turns - started_at)
                break
            if max_turns is not None and self._turns - started_at >= max_turns:
                logger.warning("Turn cap reached", max_turns=max_turns)
                self._aborted = True
                break
            if self.step() is None:
                break

        winner_id: int | None = None
        if self._targets.active_team_count() == 1:
            winner_id = self._targets.active_teams()[0]

        report = TerminationReport(
            winning_team_id=winner_id,
            winning_team_name=self._team_names.get(winner_id) if winner_id is not None else None,
            turns=self._turns - started_at,
            final_time=self._scheduler.clock,
            aborted=self._aborted,
        )
        logger.info(
            "Arena run finished",
            winner=report.winning_team_name,
            turns=report.turns,
            time=report.final_time,
            aborted=report.aborted,
        )
        return report


__all__ = [
    "BlueprintFactory",
    "EventListener",
    "TerminationReport",
    "Arena",
]
