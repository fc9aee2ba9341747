"""
Alert Channel.

Plays the audible tone and the haptic pulse for alarms. Every operation is
best-effort: backend failures are logged and swallowed so alarm visuals keep
working even when the device is silent.

The mute flag suppresses sound only. Vibration still fires while muted.
"""

from typing import List, Optional

from focus_timer.interfaces.alert import SoundInterface, VibrationInterface
from focus_timer.utils.logging import get_logger, log_error

logger = get_logger(__name__)

DEFAULT_VIBRATION_PATTERN = [500, 200, 500]


class AlertChannel:
    """
    Sound plus vibration output with a global mute flag.

    Example:
        >>> channel = AlertChannel(sound=TerminalBell())
        >>> channel.alert()
        >>> channel.muted = True
        >>> channel.play()  # silent
    """

    def __init__(
        self,
        sound: Optional[SoundInterface] = None,
        vibration: Optional[VibrationInterface] = None,
        vibration_pattern: Optional[List[int]] = None,
        muted: bool = False,
    ):
        """
        Initialize alert channel.

        Args:
            sound: Sound backend (None means no audio output)
            vibration: Vibration backend (None means unsupported)
            vibration_pattern: Vibrate/pause pattern in milliseconds
            muted: Initial mute state
        """
        self.sound = sound
        self.vibration = vibration
        self.vibration_pattern = list(vibration_pattern or DEFAULT_VIBRATION_PATTERN)
        self.muted = muted
        self._stats = {
            "played": 0,
            "muted": 0,
            "vibrated": 0,
            "failures": 0,
        }

    def alert(self) -> None:
        """Fire one alert: tone then vibration."""
        self.play()
        self.vibrate()

    def play(self) -> bool:
        """
        Play the alert tone.

        Returns:
            True if the backend accepted the request
        """
        if self.muted:
            self._stats["muted"] += 1
            logger.debug("alert_muted")
            return False

        if self.sound is None:
            logger.debug("sound_not_available")
            return False

        try:
            self.sound.play()
        except Exception as e:
            self._stats["failures"] += 1
            logger.warning("alert_sound_failed", **log_error(e))
            return False

        self._stats["played"] += 1
        return True

    def vibrate(self) -> bool:
        """
        Pulse the vibration motor.

        Returns:
            True if the backend accepted the request
        """
        if self.vibration is None:
            logger.info("vibration_not_supported")
            return False

        try:
            self.vibration.vibrate(self.vibration_pattern)
        except Exception as e:
            self._stats["failures"] += 1
            logger.warning("alert_vibration_failed", **log_error(e))
            return False

        self._stats["vibrated"] += 1
        return True

    def get_statistics(self):
        """Alert counters."""
        return dict(self._stats)
