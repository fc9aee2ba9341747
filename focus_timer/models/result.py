"""
Result models for focus-timer.

Every operation exposed to the presentation layer returns an OperationResult
instead of raising.
"""

from typing import Optional

from pydantic import BaseModel, Field

from focus_timer.models.timer import TimerView


class OperationResult(BaseModel):
    """
    Outcome of a presentation-facing operation.

    Attributes:
        success: Whether the operation was applied
        reason: Failure reason string (validation message or lookup failure)
        timer: Snapshot of the affected timer, if any

    Example:
        >>> OperationResult.fail("must be a whole number")
        OperationResult(success=False, reason='must be a whole number', timer=None)
    """

    success: bool = Field(..., description="Whether the operation succeeded")
    reason: Optional[str] = Field(default=None, description="Failure reason")
    timer: Optional[TimerView] = Field(default=None, description="Affected timer")

    @classmethod
    def ok(cls, timer: Optional[TimerView] = None) -> "OperationResult":
        """Successful result."""
        return cls(success=True, timer=timer)

    @classmethod
    def fail(cls, reason: str) -> "OperationResult":
        """Failed result carrying a reason string."""
        return cls(success=False, reason=reason)
