"""
In-memory implementation of the KeyValueStore port.

Used for tests and local tooling. A plain dict gives no isolation,
so every access, and every atomic unit as a whole, runs under one
re-entrant lock, and a failed unit restores the snapshot taken when
it was opened.
"""

import contextlib
import copy
import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Iterator, Optional

from core.domain.storage import StorageKey, StorageScope
from core.ports.key_value_store import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local KeyValueStore with snapshot rollback."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize an empty store.

        Args:
            clock: Returns the current time (defaults to UTC now)
        """
        self._records: Dict[str, Any] = {}
        self._leases: Dict[StorageScope, datetime] = {}
        self._lock = threading.RLock()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def get(self, key: StorageKey) -> Optional[Any]:
        with self._lock:
            return copy.deepcopy(self._records.get(key.encode()))

    def set(self, key: StorageKey, value: Any) -> None:
        with self._lock:
            self._records[key.encode()] = copy.deepcopy(value)

    def extend_retention(
        self, scope: StorageScope, min_ttl_seconds: int, extend_to_seconds: int
    ) -> None:
        with self._lock:
            now = self._clock()
            current = self._leases.get(scope)
            if current and current - now >= timedelta(seconds=min_ttl_seconds):
                return
            self._leases[scope] = now + timedelta(seconds=extend_to_seconds)

    def expires_at(self, scope: StorageScope) -> Optional[datetime]:
        """Return when a scope's retention lapses, or None."""
        with self._lock:
            return self._leases.get(scope)

    @contextlib.contextmanager
    def atomic(self) -> Iterator[None]:
        """Hold the store lock for the whole unit; roll back on error."""
        with self._lock:
            snapshot = dict(self._records)
            try:
                yield
            except BaseException:
                self._records = snapshot
                raise

    def dump(self) -> Dict[str, Any]:
        """Return a copy of all records keyed by encoded key."""
        with self._lock:
            return copy.deepcopy(self._records)
