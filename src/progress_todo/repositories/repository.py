"""Storage abstraction layer for progress-todo.

This module defines the abstract base class (interface) for the durable
medium, following the hexagonal architecture (Ports & Adapters) pattern.

The medium is a plain string key-value store. It knows nothing about tasks;
serialization of the task list lives in ``services.persistent_store``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """Abstract base class for a durable string key-value store.

    Implementations raise ``StorageError`` subclasses when the medium fails;
    callers above this layer decide whether a failure is fatal.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            The stored string, or None if the key is absent

        Raises:
            StorageUnavailableError: If the medium cannot be read
        """
        raise NotImplementedError(
            "KeyValueStorage.get_item() must be implemented by adapter"
        )

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value.

        Args:
            key: Storage key
            value: String to store

        Raises:
            StorageQuotaExceededError: If the value does not fit
            StorageUnavailableError: If the medium cannot be written
        """
        raise NotImplementedError(
            "KeyValueStorage.set_item() must be implemented by adapter"
        )

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove a key. Removing an absent key is a no-op.

        Raises:
            StorageUnavailableError: If the medium cannot be written
        """
        raise NotImplementedError(
            "KeyValueStorage.remove_item() must be implemented by adapter"
        )

    def close(self) -> None:
        """Release any resource held by the backend."""
