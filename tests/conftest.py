"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the Gamerena arena simulator test suite.
"""

from __future__ import annotations

from itertools import cycle
from typing import TYPE_CHECKING, Callable, Sequence

import pytest

from gamerena.engine.rng import RandomSource, team_id_for
from gamerena.models.blueprint import Blueprint, SkillEntry, SkillKind, TargetClass
from gamerena.models.entity import Entity
from gamerena.models.stats import StatBlock


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Deterministic Random Sources
# =============================================================================


class ConstantRandom(RandomSource):
    """RandomSource whose every draw returns the same value."""

    def __init__(self, value: float = 0.5) -> None:
        super().__init__(seed=0)
        self.value = value

    def random(self) -> float:
        return self.value


class SequenceRandom(RandomSource):
    """RandomSource cycling through a fixed list of values."""

    def __init__(self, values: Sequence[float]) -> None:
        super().__init__(seed=0)
        self._values = cycle(values)

    def random(self) -> float:
        return next(self._values)


DEFAULT_STATS: dict[str, int] = {
    "hp": 200,
    "attack": 50,
    "defense": 50,
    "magic": 50,
    "magic_defense": 50,
    "speed": 50,
    "accuracy": 50,
    "intelligence": 50,
}

STRIKE_ONLY = (SkillEntry(kind=SkillKind.STRIKE, target=TargetClass.ENEMY, weight=1),)


def build_blueprint(
    name: str,
    team_name: str = "red",
    *,
    skills: Sequence[SkillEntry] = STRIKE_ONLY,
    **stats: int,
) -> Blueprint:
    """Build a Blueprint with explicit stats, defaulting to 50 everywhere and 200 HP."""
    return Blueprint(
        name=name,
        team_name=team_name,
        team_id=team_id_for(team_name),
        stats=StatBlock(**{**DEFAULT_STATS, **stats}),
        skills=tuple(skills),
    )


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from gamerena.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def isolated_env(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory without any GAMERENA_* variables."""
    import os

    for key in list(os.environ):
        if key.startswith("GAMERENA_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(isolated_env: None):
    """Provide default settings unaffected by the environment."""
    from gamerena.core.config import Settings

    return Settings()


# =============================================================================
# Random Fixtures
# =============================================================================


@pytest.fixture
def constant_rng() -> Callable[[float], ConstantRandom]:
    """Factory for constant random sources."""
    return ConstantRandom


@pytest.fixture
def sequence_rng() -> Callable[[Sequence[float]], SequenceRandom]:
    """Factory for cycling random sources."""
    return SequenceRandom


@pytest.fixture
def seeded_rng() -> RandomSource:
    """Provide a reproducible stdlib-backed random source."""
    return RandomSource(seed=20240601)


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def make_blueprint() -> Callable[..., Blueprint]:
    """Factory for blueprints with explicit stats."""
    return build_blueprint


@pytest.fixture
def make_entity() -> Callable[..., Entity]:
    """Factory for entities built from explicit stats."""

    def _make(name: str, team_name: str = "red", **kwargs) -> Entity:
        return Entity(build_blueprint(name, team_name, **kwargs))

    return _make
