"""
Sound backends.
"""

import sys
from typing import Optional, TextIO

from focus_timer.interfaces.alert import SoundInterface
from focus_timer.utils.exceptions import AlertChannelError


class TerminalBell(SoundInterface):
    """Ring the terminal bell a number of times."""

    def __init__(self, stream: Optional[TextIO] = None, rings: int = 1):
        self.stream = stream
        self.rings = rings

    def play(self) -> None:
        stream = self.stream or sys.stdout
        try:
            stream.write("\a" * self.rings)
            stream.flush()
        except (OSError, ValueError) as e:
            raise AlertChannelError("Terminal bell unavailable", cause=e)
