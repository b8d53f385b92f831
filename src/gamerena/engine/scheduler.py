"""Readiness-clock scheduler.

Entities sit in a binary min-heap keyed by their readiness time. Knocked
out entities are not removed when they go inactive; they are discarded
the next time they surface at the top of the heap.

Ties on readiness time resolve in insertion order (first pushed, first
served) via a monotonically increasing serial in each heap entry.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Callable

from gamerena.core.config import SchedulerSettings, get_settings
from gamerena.core.exceptions import PreconditionViolatedError
from gamerena.core.logging import get_logger
from gamerena.engine.rng import RandomSource
from gamerena.models.entity import Entity


logger = get_logger(__name__)

ActionHandler = Callable[[Entity], None]
TurnListener = Callable[[Entity, int], None]


class Scheduler:
    """Min-heap action loop over entities.

    Example:
        >>> scheduler = Scheduler(act, rng=RandomSource(seed=1))
        >>> scheduler.insert(alice)
        >>> scheduler.insert(bob)
        >>> actor = scheduler.advance()
    """

    def __init__(
        self,
        act: ActionHandler,
        *,
        rng: RandomSource,
        settings: SchedulerSettings | None = None,
        on_turn: TurnListener | None = None,
    ) -> None:
        """Initialize the scheduler.

        Args:
            act: Called with the entity whose turn it is.
            rng: Combat random source, used for wait-time rolls.
            settings: Wait-time constants; global settings when omitted.
            on_turn: Optional listener notified after each completed turn.
        """
        self._act = act
        self._rng = rng
        self._settings = settings or get_settings().scheduler
        self._on_turn = on_turn
        self._heap: list[tuple[int, int, Entity]] = []
        self._serial = itertools.count()
        self._clock = 0
        self._last_entity: Entity | None = None
        self._started = False

    @property
    def clock(self) -> int:
        """Readiness time of the most recently started turn."""
        return self._clock

    @property
    def last_entity(self) -> Entity | None:
        return self._last_entity

    def __len__(self) -> int:
        return len(self._heap)

    def wait_time(self, entity: Entity) -> int:
        """Roll the delay before ``entity``'s next turn.

        Higher effective Speed gives a shorter wait. The result never
        drops below ``min_wait``.
        """
        cfg = self._settings
        speed = entity.effective_stats().speed
        wait = int(
            cfg.base_wait_time
            - cfg.speed_flat * speed
            - cfg.speed_random * speed * self._rng.random()
        )
        return max(wait, cfg.min_wait)

    def insert(self, entity: Entity) -> None:
        """Schedule an entity's first turn relative to the current clock."""
        entity.state.readiness_time = self._clock + self.wait_time(entity)
        self._push(entity)
        self._started = True

    def _push(self, entity: Entity) -> None:
        heapq.heappush(self._heap, (entity.state.readiness_time, next(self._serial), entity))

    def advance(self) -> Entity | None:
        """Run the next turn.

        Returns:
            The entity that acted, or None when fewer than two entities
            remain and no further action can occur. A heap drained by
            lazy deletion also returns None.

        Raises:
            PreconditionViolatedError: If nothing was ever inserted.
        """
        if not self._started:
            raise PreconditionViolatedError("no participants")

        while self._heap and not self._heap[0][2].active:
            _, _, dropped = heapq.heappop(self._heap)
            logger.debug("Discarded inactive entity", entity=dropped.name)

        if len(self._heap) < 2:
            logger.info("Scheduler exhausted", remaining=len(self._heap), time=self._clock)
            return None

        time, _, entity = heapq.heappop(self._heap)
        self._clock = time

        self._act(entity)
        for modifier in entity.expire_modifiers(self._clock):
            logger.debug("Modifier expired", entity=entity.name, modifier=modifier.name)

        entity.state.readiness_time = self._clock + self.wait_time(entity)
        self._push(entity)
        self._last_entity = entity

        if self._on_turn is not None:
            self._on_turn(entity, time)
        return entity


__all__ = [
    "ActionHandler",
    "TurnListener",
    "Scheduler",
]
