"""
Key-value store port (interface).

This defines the contract the ledger needs from durable storage.
Implementations are in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Any, ContextManager, Optional

from core.domain.storage import StorageKey, StorageScope


class KeyValueStore(ABC):
    """
    Abstract durable mapping from structured keys to JSON-compatible values.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.

    All reads and writes made inside one ``atomic()`` block commit
    together or not at all, and are serialized against other atomic
    blocks touching the same keys.
    """

    @abstractmethod
    def get(self, key: StorageKey) -> Optional[Any]:
        """
        Read a value.

        Args:
            key: Structured storage key

        Returns:
            Stored value or None if the key was never written
        """
        pass

    @abstractmethod
    def set(self, key: StorageKey, value: Any) -> None:
        """
        Write a value, replacing any previous one.

        Args:
            key: Structured storage key
            value: JSON-compatible value
        """
        pass

    @abstractmethod
    def extend_retention(
        self, scope: StorageScope, min_ttl_seconds: int, extend_to_seconds: int
    ) -> None:
        """
        Extend the lifetime of a storage scope.

        If less than min_ttl_seconds remain, the scope is kept alive
        for extend_to_seconds from now.

        Args:
            scope: Retention scope
            min_ttl_seconds: Threshold below which to extend
            extend_to_seconds: New lifetime in seconds
        """
        pass

    @abstractmethod
    def atomic(self) -> ContextManager[None]:
        """
        Open an atomic unit of work.

        Returns:
            Context manager; an exception inside it discards every write
        """
        pass
