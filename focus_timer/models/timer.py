"""
Timer models for focus-timer.

Timer is the mutable runtime entity. TimerRecord is its durable subset, the
shape written to the persistence store. TimerView is a read-only snapshot
handed to the presentation layer.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from focus_timer.utils.formatting import format_time, progress_percent, progress_stage


@dataclass
class Timer:
    """
    One independent countdown.

    Schedule handles are not stored here: the lifecycle engine and the alarm
    coordinator each keep their own index keyed by timer id.

    Attributes:
        id: Unique positive identifier, never reused
        name: User-supplied label
        duration: Total length in seconds
        time_left: Remaining seconds
        is_running: True while a tick schedule exists for this timer
    """

    id: int
    name: str
    duration: int
    time_left: int
    is_running: bool = False

    @property
    def is_finished(self) -> bool:
        """True once the countdown reached zero and stopped."""
        return not self.is_running and self.time_left <= 0

    def to_record(self) -> "TimerRecord":
        """Durable subset of this timer."""
        return TimerRecord(
            id=self.id,
            name=self.name,
            duration=self.duration,
            time_left=self.time_left,
        )

    @classmethod
    def from_record(cls, record: "TimerRecord") -> "Timer":
        """Rehydrate a stopped timer from a persisted record."""
        return cls(
            id=record.id,
            name=record.name,
            duration=record.duration,
            time_left=record.time_left,
            is_running=False,
        )


class TimerRecord(BaseModel):
    """
    Persisted timer state.

    Serialized with the ``timeLeft`` key so existing saved state stays
    readable. ``time_left`` is clamped into ``[0, duration]``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., ge=1, description="Timer id")
    name: str = Field(..., min_length=1, description="Timer name")
    duration: int = Field(..., ge=1, description="Duration in seconds")
    time_left: int = Field(..., alias="timeLeft", description="Remaining seconds")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Apply the same blank-name rule as timer creation."""
        v = v.strip()
        if not v:
            raise ValueError("name required")
        return v

    @model_validator(mode="after")
    def clamp_time_left(self) -> "TimerRecord":
        """Keep remaining time inside the duration."""
        self.time_left = max(0, min(self.time_left, self.duration))
        return self


class TimerView(BaseModel):
    """
    Render snapshot of a timer.

    Attributes:
        id: Timer id
        name: Timer name
        duration: Total seconds
        time_left: Remaining seconds
        is_running: Whether the timer is ticking
        is_alarming: Whether the timer's alarm is sounding
        display: Remaining time as "m:ss"
        progress: Elapsed percentage (0-100)
        stage: "early", "middle" or "final"
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    duration: int
    time_left: int
    is_running: bool
    is_alarming: bool = False
    display: str
    progress: float
    stage: str

    @classmethod
    def from_timer(cls, timer: Timer, is_alarming: bool = False) -> "TimerView":
        """Build a snapshot from a live timer."""
        percent = progress_percent(timer.duration, timer.time_left)
        return cls(
            id=timer.id,
            name=timer.name,
            duration=timer.duration,
            time_left=timer.time_left,
            is_running=timer.is_running,
            is_alarming=is_alarming,
            display=format_time(timer.time_left),
            progress=percent,
            stage=progress_stage(percent),
        )
