"""
Focus Timer - multi-timer countdown core.

Named countdown timers that can be started, paused, reset and deleted,
survive reloads through a key-value store, and raise a repeating alarm
(sound, vibration, flash, title change) when they reach zero.

Core Components:
    - Registry: Timer collection and id allocation
    - Engine: Timer lifecycle state machine and alarm coordination
    - Storage: Key-value stores and the checkpoint round-trip
    - Scheduling: Event-loop and manually driven clocks
    - Alerts: Sound and vibration output with mute
    - Events: Bus through which the presentation layer is notified
    - Utils: Logging, config, validation, formatting

Example:
    >>> from focus_timer import FocusTimerApp
    >>> from focus_timer.scheduling import ManualClock
    >>> from focus_timer.storage import InMemoryStore
    >>>
    >>> clock = ManualClock()
    >>> app = FocusTimerApp(clock=clock, store=InMemoryStore())
    >>> app.initialize()
    >>> app.toggle_start_pause(1).timer.display
    '4:59'
"""

from focus_timer.__version__ import (
    __author__,
    __author_email__,
    __description__,
    __license__,
    __title__,
    __url__,
    __version__,
    __version_info__,
)
from focus_timer.app import FocusTimerApp, create_app

__all__ = [
    "__version__",
    "__version_info__",
    "__title__",
    "__description__",
    "__author__",
    "__author_email__",
    "__license__",
    "__url__",
    "FocusTimerApp",
    "create_app",
]
