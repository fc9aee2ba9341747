"""
Alert Interfaces - sound and vibration backend contracts.

Backends do the actual output; AlertChannel decides when to call them and
absorbs their failures.
"""

from abc import ABC, abstractmethod
from typing import List


class SoundInterface(ABC):
    """
    Abstract interface for audible alert backends.

    Example:
        >>> class Beeper(SoundInterface):
        ...     def play(self):
        ...         winsound.Beep(1000, 300)
    """

    @abstractmethod
    def play(self) -> None:
        """
        Play one alert tone.

        Raises:
            AlertChannelError: If playback is blocked or fails
        """
        pass


class VibrationInterface(ABC):
    """Abstract interface for haptic alert backends."""

    @abstractmethod
    def vibrate(self, pattern: List[int]) -> None:
        """
        Vibrate using an on/off pattern.

        Args:
            pattern: Alternating vibrate/pause durations in milliseconds

        Raises:
            AlertChannelError: If the device rejects the request
        """
        pass
