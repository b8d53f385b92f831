"""Custom exception hierarchy for the Gamerena arena simulator.

All exceptions inherit from GamerenaError, enabling unified error handling
at the host boundary while preserving domain-specific context in
``details``.

Example:
    >>> from gamerena.core.exceptions import DuplicateRegistrationError
    >>> raise DuplicateRegistrationError("Name has been used", name="Alice")
"""

from __future__ import annotations

from typing import Any


class GamerenaError(Exception):
    """Base exception for all Gamerena errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration
# =============================================================================


class ConfigurationError(GamerenaError):
    """Raised when arena configuration is invalid.

    This includes inverted stat ranges, non-positive wait times, or
    settings that fail to load from the environment.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Validation & Registration
# =============================================================================


class InvalidArgumentError(GamerenaError):
    """Raised when an argument fails validation.

    Covers null or malformed modifiers, non-positive skill weights and
    malformed team or entity names.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid argument error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the argument that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


class EntryParseError(InvalidArgumentError):
    """Raised when a ``name@team`` input line cannot be parsed."""

    def __init__(
        self,
        message: str,
        *,
        line: str | None = None,
        field_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize entry parse error with the offending line.

        Args:
            message: Human-readable error description.
            line: The raw input line.
            field_name: Which part of the line was rejected.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if line is not None:
            combined_details["line"] = line
        super().__init__(message, field_name=field_name, details=combined_details)


class DuplicateRegistrationError(GamerenaError):
    """Raised when an entity name is registered twice in one arena."""

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize duplicate registration error.

        Args:
            message: Human-readable error description.
            name: The entity name that was reused.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if name is not None:
            combined_details["name"] = name
        super().__init__(message, details=combined_details)


# =============================================================================
# Simulation
# =============================================================================


class PreconditionViolatedError(GamerenaError):
    """Raised when an operation is invoked in a state that forbids it.

    The canonical case is advancing the scheduler before any participant
    has been registered.
    """


__all__ = [
    "GamerenaError",
    "ConfigurationError",
    "InvalidArgumentError",
    "EntryParseError",
    "DuplicateRegistrationError",
    "PreconditionViolatedError",
]
