"""
Store Interface - key-value persistence contract.

Defines the contract for persistence backends (in-memory, file, ...).
"""

from abc import ABC, abstractmethod
from typing import Optional


class StoreInterface(ABC):
    """
    Abstract interface for key-value string stores.

    Implementations raise PersistenceError when the backing storage cannot be
    read or written. Absent keys are not errors.

    Example:
        >>> store.set("focus-timers", "[]")
        >>> store.get("focus-timers")
        '[]'
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read a value.

        Args:
            key: Storage key

        Returns:
            Stored string, or None if the key is absent

        Raises:
            PersistenceError: If the store cannot be read
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Write a value, replacing any previous one.

        Args:
            key: Storage key
            value: String payload

        Raises:
            PersistenceError: If the store cannot be written
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Remove a key. Removing an absent key is a no-op.

        Raises:
            PersistenceError: If the store cannot be written
        """
        pass
