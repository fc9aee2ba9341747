"""
Utility modules for focus-timer.

Modules:
    exceptions: Custom exception hierarchy
    logging: Structured logging configuration
    validation: Input validation helpers
    formatting: Display formatting helpers
    config: Configuration loading and management
"""

from focus_timer.utils.config import load_config, merge_configs, save_config
from focus_timer.utils.exceptions import (
    AlertChannelError,
    ConfigError,
    EventError,
    FocusTimerError,
    PersistenceError,
    ValidationError,
)
from focus_timer.utils.formatting import format_time, progress_percent, progress_stage
from focus_timer.utils.logging import get_logger, log_error, setup_logging
from focus_timer.utils.validation import (
    parse_duration_minutes,
    validate_duration_minutes,
    validate_timer_name,
)

__all__ = [
    # Exceptions
    "FocusTimerError",
    "ValidationError",
    "PersistenceError",
    "AlertChannelError",
    "ConfigError",
    "EventError",
    # Logging
    "setup_logging",
    "get_logger",
    "log_error",
    # Validation
    "validate_timer_name",
    "validate_duration_minutes",
    "parse_duration_minutes",
    # Formatting
    "format_time",
    "progress_percent",
    "progress_stage",
    # Config
    "load_config",
    "save_config",
    "merge_configs",
]
