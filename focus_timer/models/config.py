"""
Configuration models for focus-timer.

Defines configuration structures for focus-timer components.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """
    Configuration for the persistence store.

    Attributes:
        backend: Store type ("file" or "memory")
        path: Directory for the file store
        key: Storage key the timer records live under

    Example:
        >>> config = StorageConfig(backend="file", path="~/.focus_timer")
    """

    backend: str = Field(default="file", description="Store backend")
    path: str = Field(default="./focus_timer_state", min_length=1, description="Store path")
    key: str = Field(default="focus-timers", min_length=1, description="Storage key")

    @field_validator("backend")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        """Normalize and validate backend name."""
        v = v.lower()
        if v not in ["file", "memory"]:
            raise ValueError("backend must be 'file' or 'memory'")
        return v


class TimerConfig(BaseModel):
    """
    Configuration for timer lifecycle behavior.

    Attributes:
        tick_interval: Seconds between ticks
        checkpoint_every: Checkpoint when time left is a multiple of this
        default_name: Name of the timer seeded on first run
        default_minutes: Duration of the seeded timer
    """

    tick_interval: float = Field(default=1.0, gt=0.0, description="Tick interval in seconds")
    checkpoint_every: int = Field(default=10, ge=1, description="Checkpoint period in ticks")
    default_name: str = Field(default="Focus Timer", min_length=1, description="Seed timer name")
    default_minutes: int = Field(default=5, ge=1, le=999, description="Seed timer minutes")


class AlarmConfig(BaseModel):
    """
    Configuration for alarms and alerts.

    Attributes:
        repeat_interval: Seconds between repeated alerts while alarming
        flash_duration: Seconds the screen flash stays on
        vibration_pattern: Vibrate/pause pattern in milliseconds
        alarm_title: Page title while any alarm is sounding
        idle_title: Page title otherwise
        start_muted: Initial state of the mute flag
    """

    repeat_interval: float = Field(default=2.0, gt=0.0, description="Alert repeat interval")
    flash_duration: float = Field(default=0.3, ge=0.0, description="Flash duration")
    vibration_pattern: List[int] = Field(
        default_factory=lambda: [500, 200, 500], description="Vibration pattern (ms)"
    )
    alarm_title: str = Field(default="⏰ TIME'S UP!", description="Title while alarming")
    idle_title: str = Field(default="Focus Timer", description="Title when idle")
    start_muted: bool = Field(default=False, description="Start muted")

    @field_validator("vibration_pattern")
    @classmethod
    def validate_pattern(cls, v: List[int]) -> List[int]:
        """Reject negative segments."""
        if any(segment < 0 for segment in v):
            raise ValueError("vibration_pattern segments must be non-negative")
        return v


class FocusTimerConfig(BaseModel):
    """
    Complete focus-timer configuration.

    Attributes:
        storage: Storage configuration
        timer: Timer configuration
        alarm: Alarm configuration
        log_level: Logging level
        log_format: Log format (json, text)

    Example:
        >>> config = FocusTimerConfig(storage=StorageConfig(backend="memory"))
    """

    storage: StorageConfig = Field(default_factory=StorageConfig, description="Storage")
    timer: TimerConfig = Field(default_factory=TimerConfig, description="Timers")
    alarm: AlarmConfig = Field(default_factory=AlarmConfig, description="Alarms")
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="text", description="Log format")

    @field_validator("log_level")
    @classmethod
    def log_level_uppercase(cls, v: str) -> str:
        """Convert log level to uppercase."""
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        if v not in ["json", "text"]:
            raise ValueError("log_format must be 'json' or 'text'")
        return v.lower()
