"""
Persistence for focus-timer.

Key-value stores and the timer checkpoint round-trip built on them.
"""

from focus_timer.storage.persistence import DEFAULT_STORAGE_KEY, TimerPersistence
from focus_timer.storage.stores import FileStore, InMemoryStore

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "TimerPersistence",
    "FileStore",
    "InMemoryStore",
]
