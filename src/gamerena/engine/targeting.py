"""Team-partitioned target selection.

The team index is derived state: it still lists entities that have been
knocked out until someone marks it dirty, and it is rebuilt lazily right
before the next query.
"""

from __future__ import annotations

from bisect import bisect_left, insort

from gamerena.core.logging import get_logger
from gamerena.engine.rng import RandomSource
from gamerena.models.entity import Entity


logger = get_logger(__name__)


class TargetSelector:
    """Answer random-ally and random-enemy queries over live teams.

    Attributes:
        last_target: The entity returned by the most recent query.
    """

    def __init__(self) -> None:
        """Initialize an empty selector."""
        self._active_teams: list[int] = []
        self._teams: dict[int, list[Entity]] = {}
        self._dirty = True
        self.last_target: Entity | None = None

    def add_entity(self, entity: Entity) -> None:
        """Register an entity under its team, tracking new teams in sorted order."""
        team_id = entity.team_id
        if team_id not in self._teams:
            insort(self._active_teams, team_id)
            self._teams[team_id] = []
        self._teams[team_id].append(entity)
        self._dirty = True

    def mark_dirty(self) -> None:
        self._dirty = True

    def _refresh(self) -> None:
        if not self._dirty:
            return
        self._dirty = False
        for team_id in list(self._active_teams):
            live = [entity for entity in self._teams[team_id] if entity.active]
            if live:
                self._teams[team_id] = live
            else:
                del self._teams[team_id]
                self._active_teams.remove(team_id)
                logger.info("Team eliminated", team_id=team_id)

    def active_team_count(self) -> int:
        self._refresh()
        return len(self._active_teams)

    def active_teams(self) -> tuple[int, ...]:
        self._refresh()
        return tuple(self._active_teams)

    def members(self, team_id: int) -> tuple[Entity, ...]:
        self._refresh()
        return tuple(self._teams.get(team_id, ()))

    def random_enemy(self, entity: Entity, rng: RandomSource) -> Entity | None:
        """Pick a live entity from a team other than ``entity``'s.

        A uniformly chosen team is drawn first, then a uniformly chosen
        member. An entity whose team is not tracked may be given anyone.

        Returns:
            The chosen enemy, or None if no other team is active.
        """
        self._refresh()
        own_team = entity.team_id
        if own_team not in self._teams:
            if not self._active_teams:
                return None
            team_id = rng.pick(self._active_teams)
        else:
            candidates = len(self._active_teams) - 1
            if candidates <= 0:
                return None
            own_index = bisect_left(self._active_teams, own_team)
            select = rng.below(candidates)
            if select >= own_index:
                select += 1
            team_id = self._active_teams[select]

        self.last_target = rng.pick(self._teams[team_id])
        return self.last_target

    def random_ally(self, entity: Entity, rng: RandomSource) -> Entity:
        """Pick another live member of ``entity``'s team, or ``entity`` itself."""
        self._refresh()
        members = self._teams.get(entity.team_id, [])
        others = [member for member in members if member is not entity]
        self.last_target = rng.pick(others) if others else entity
        return self.last_target


__all__ = ["TargetSelector"]
