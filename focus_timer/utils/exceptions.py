"""
Custom exceptions for focus-timer.

Defines a hierarchy of exceptions for better error handling.
"""

from typing import Any, Dict, Optional


class FocusTimerError(Exception):
    """
    Base exception for all focus-timer errors.

    Attributes:
        message: Error message
        details: Additional error details
        cause: Original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """
        Initialize focus-timer error.

        Args:
            message: Error message
            details: Additional error details
            cause: Original exception
        """
        self.message = message
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def __str__(self) -> str:
        """String representation of error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message='{self.message}', details={self.details})"


class ValidationError(FocusTimerError):
    """
    Validation errors.

    Raised when user input is rejected, before any state is mutated.
    The message is the user-facing reason string.

    Example:
        >>> raise ValidationError("must be a whole number", details={"field": "duration"})
    """

    @property
    def reason(self) -> str:
        """User-facing reason string."""
        return self.message


class PersistenceError(FocusTimerError):
    """
    Persistence store errors.

    Raised when the key-value store cannot be read or written.

    Example:
        >>> raise PersistenceError("Failed to write key", details={"key": "focus-timers"})
    """

    pass


class AlertChannelError(FocusTimerError):
    """
    Alert channel errors.

    Raised by sound or vibration backends when playback fails.

    Example:
        >>> raise AlertChannelError("Audio device unavailable")
    """

    pass


class ConfigError(FocusTimerError):
    """
    Configuration-related errors.

    Raised when configuration is invalid, missing, or cannot be loaded.
    """

    pass


class EventError(FocusTimerError):
    """
    Event system errors.

    Raised when an event cannot be dispatched.
    """

    pass
