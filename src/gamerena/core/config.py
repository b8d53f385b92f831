"""Configuration management for the Gamerena arena simulator.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides. Every
numeric constant of the simulation (wait times, stat ranges, damage and
heal profiles) lives here so that it can be tuned without code changes.

Example:
    >>> from gamerena.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.scheduler.base_wait_time
    160

Environment Variables:
    GAMERENA_SEED: Seed for the per-run combat random source.
    GAMERENA_MAX_TURNS: Turn cap for a single run.
    GAMERENA_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    GAMERENA_SCHEDULER_BASE_WAIT_TIME: Base wait between two turns.
    GAMERENA_COMBAT_KILL_BONUS: Score bonus for a deactivating hit.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gamerena.core.exceptions import ConfigurationError


# =============================================================================
# Skill Profiles
# =============================================================================


class DamageProfile(BaseModel):
    """Constants for one damage-dealing skill.

    Attributes:
        kind: Whether offense/defense read Attack/Defense or Magic/MagicDefense.
        base: Flat damage added to every hit.
        offense_flat: Fixed share of the actor's offense stat.
        offense_random: Random share of the actor's offense stat.
        defense_flat: Fixed share of the target's defense stat subtracted.
        defense_random: Random share of the target's defense stat subtracted.
        intelligence_scale: Share of the actor's Intelligence added.
        factor: Multiplier applied to the whole roll.
        dodge_base: Base dodge chance in percent.
        accuracy_divisor: Divisor of the Accuracy gap in the dodge chance.
        defense_divisor: Divisor of the defense/offense gap in the dodge chance.
        intelligence_divisor: Divisor of actor Intelligence in the dodge chance (0 disables).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["physical", "magical"]
    base: float = Field(ge=0)
    offense_flat: float = 0.0
    offense_random: float = 0.0
    defense_flat: float = 0.0
    defense_random: float = 0.0
    intelligence_scale: float = 0.0
    factor: float = Field(default=1.0, gt=0)
    dodge_base: int = 16
    accuracy_divisor: int = Field(default=4, gt=0)
    defense_divisor: int = Field(default=8, gt=0)
    intelligence_divisor: int = Field(default=0, ge=0)


class HealProfile(BaseModel):
    """Constants for one healing skill.

    Attributes:
        base: Flat heal added to every cast.
        magic_flat: Fixed share of the actor's Magic.
        magic_random: Random share of the actor's Magic.
        intelligence_scale: Share of the actor's Intelligence added.
        factor: Multiplier applied to the whole roll.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base: float = Field(ge=0)
    magic_flat: float = 0.0
    magic_random: float = 0.0
    intelligence_scale: float = 0.0
    factor: float = Field(default=1.0, gt=0)


PHYSICAL_STRIKE = DamageProfile(
    kind="physical",
    base=15,
    offense_flat=0.3,
    offense_random=0.9,
    defense_flat=0.2,
    defense_random=0.3,
    dodge_base=16,
    accuracy_divisor=4,
    defense_divisor=8,
)

MAGIC_BOLT = DamageProfile(
    kind="magical",
    base=25,
    offense_flat=0.6,
    offense_random=0.6,
    defense_flat=0.0,
    defense_random=0.75,
    intelligence_scale=0.2,
    dodge_base=25,
    accuracy_divisor=8,
    defense_divisor=8,
    intelligence_divisor=8,
)


# =============================================================================
# Settings Domains
# =============================================================================


class SchedulerSettings(BaseSettings):
    """Configuration for the readiness clock.

    Attributes:
        base_wait_time: Wait before re-readiness at zero Speed.
        speed_flat: Fixed Speed coefficient subtracted from the wait.
        speed_random: Random Speed coefficient subtracted from the wait.
        min_wait: Lower bound on a single wait, keeps the clock monotonic.
    """

    model_config = SettingsConfigDict(
        env_prefix="GAMERENA_SCHEDULER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_wait_time: int = Field(default=160, gt=0, description="Base wait time")
    speed_flat: float = Field(default=0.3, ge=0, description="Fixed Speed coefficient")
    speed_random: float = Field(default=0.5, ge=0, description="Random Speed coefficient")
    min_wait: int = Field(default=1, ge=0, description="Minimum wait per turn")


class BlueprintSettings(BaseSettings):
    """Configuration for name-seeded stat generation.

    Ranges are half-open: ``[min, max)``.

    Attributes:
        hp_min: Lowest generated HP.
        hp_max: Upper bound (exclusive) of generated HP.
        stat_min: Lowest value of every other stat.
        stat_max: Upper bound (exclusive) of every other stat.
    """

    model_config = SettingsConfigDict(
        env_prefix="GAMERENA_BLUEPRINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    hp_min: int = Field(default=200, ge=1)
    hp_max: int = Field(default=350, ge=2)
    stat_min: int = Field(default=30, ge=0)
    stat_max: int = Field(default=100, ge=1)

    @model_validator(mode="after")
    def validate_ranges(self) -> "BlueprintSettings":
        """Ensure both generation ranges are non-empty.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If a minimum is not below its maximum.
        """
        if self.hp_min >= self.hp_max:
            raise ConfigurationError(
                f"hp_min ({self.hp_min}) must be less than hp_max ({self.hp_max})",
                config_key="hp_min",
            )
        if self.stat_min >= self.stat_max:
            raise ConfigurationError(
                f"stat_min ({self.stat_min}) must be less than stat_max ({self.stat_max})",
                config_key="stat_min",
            )
        return self


class CombatSettings(BaseSettings):
    """Configuration for combat resolution.

    Each skill field is named after the skill kind it tunes.

    Attributes:
        kill_bonus: Score awarded for the hit that deactivates a target.
        strike: Baseline physical attack.
        spell: Baseline magic attack.
        fireball: Heavy magic attack.
        critical: Weak-spot physical attack.
        cure: Healing spell.
    """

    model_config = SettingsConfigDict(
        env_prefix="GAMERENA_COMBAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    kill_bonus: int = Field(default=30, ge=0, description="Score bonus per kill")
    strike: DamageProfile = PHYSICAL_STRIKE
    spell: DamageProfile = MAGIC_BOLT
    fireball: DamageProfile = MAGIC_BOLT.model_copy(update={"factor": 1.8})
    critical: DamageProfile = PHYSICAL_STRIKE.model_copy(update={"factor": 2.15})
    cure: HealProfile = HealProfile(
        base=10,
        magic_flat=0.25,
        magic_random=0.35,
        intelligence_scale=0.4,
        factor=1.2,
    )


class Settings(BaseSettings):
    """Main settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        log_level: Logging level.
        json_logs: Emit JSON log lines instead of console output.
        seed: Seed of the per-run combat random source (None draws a fresh one).
        max_turns: Turn cap for ``Arena.run`` (None means unbounded).
        scheduler: Readiness clock settings.
        blueprint: Stat generation settings.
        combat: Combat resolution settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="GAMERENA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(default="Gamerena", description="Application name")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(default=False, description="Emit JSON logs")
    seed: int | None = Field(default=None, description="Combat random seed")
    max_turns: int | None = Field(default=100_000, ge=1, description="Turn cap per run")

    scheduler: SchedulerSettings = Field(default_factory=SchedulerSettings)
    blueprint: BlueprintSettings = Field(default_factory=BlueprintSettings)
    combat: CombatSettings = Field(default_factory=CombatSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the settings singleton.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load arena settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "DamageProfile",
    "HealProfile",
    "SchedulerSettings",
    "BlueprintSettings",
    "CombatSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
