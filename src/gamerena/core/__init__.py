"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        GamerenaError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        InvalidArgumentError: Argument validation errors.
        EntryParseError: Malformed ``name@team`` input lines.
        DuplicateRegistrationError: Entity name reused in one arena.
        PreconditionViolatedError: Operation invoked in a forbidding state.

    Configuration:
        Settings: Main settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from gamerena.core.config import (
    BlueprintSettings,
    CombatSettings,
    DamageProfile,
    HealProfile,
    SchedulerSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from gamerena.core.exceptions import (
    ConfigurationError,
    DuplicateRegistrationError,
    EntryParseError,
    GamerenaError,
    InvalidArgumentError,
    PreconditionViolatedError,
)
from gamerena.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "GamerenaError",
    "ConfigurationError",
    "InvalidArgumentError",
    "EntryParseError",
    "DuplicateRegistrationError",
    "PreconditionViolatedError",
    # Configuration
    "DamageProfile",
    "HealProfile",
    "SchedulerSettings",
    "BlueprintSettings",
    "CombatSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
