"""
Key-value store implementations.

Provides an in-memory store and a file-based store that keeps one file per
key and writes atomically.
"""

import re
from pathlib import Path
from typing import Dict, Optional

from focus_timer.interfaces.store import StoreInterface
from focus_timer.utils.exceptions import PersistenceError
from focus_timer.utils.logging import get_logger

logger = get_logger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")


class InMemoryStore(StoreInterface):
    """
    Dictionary-backed store.

    Nothing survives the process; useful for tests and throwaway sessions.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        logger.info("store_initialized", mode="in-memory")

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        logger.debug("store_set", key=key, size=len(value))

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class FileStore(StoreInterface):
    """
    File-based store.

    Features:
    - One ``<key>.json`` file per key under a storage directory
    - Atomic writes (temp file + replace)
    - Directory created on first write

    Example:
        >>> store = FileStore("./focus_timer_state")
        >>> store.set("focus-timers", "[]")
        >>> store.get("focus-timers")
        '[]'
    """

    def __init__(self, storage_path: str):
        """
        Initialize file store.

        Args:
            storage_path: Directory holding one file per key
        """
        self.storage_path = Path(storage_path).expanduser()
        logger.info("store_initialized", storage_path=str(self.storage_path))

    def get(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        try:
            if not path.exists():
                return None
            with open(path, "r", encoding="utf-8") as f:
                value = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("store_get_failed", key=key, error=str(e))
            raise PersistenceError(
                "Failed to read key",
                details={"key": key, "path": str(path)},
                cause=e,
            )

        logger.debug("store_get", key=key)
        return value

    def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            self.storage_path.mkdir(parents=True, exist_ok=True)

            # Write atomically
            temp_file = path.with_suffix(".tmp")
            with open(temp_file, "w", encoding="utf-8") as f:
                f.write(value)

            temp_file.replace(path)
        except OSError as e:
            logger.error("store_set_failed", key=key, error=str(e))
            raise PersistenceError(
                "Failed to write key",
                details={"key": key, "path": str(path)},
                cause=e,
            )

        logger.debug("store_set", key=key, size=len(value))

    def delete(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceError(
                "Failed to delete key",
                details={"key": key, "path": str(path)},
                cause=e,
            )

    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise PersistenceError("Invalid storage key", details={"key": key})
        return self.storage_path / f"{key}.json"
