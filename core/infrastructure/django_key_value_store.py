"""
Django implementation of the KeyValueStore port.

Records live in the LedgerRecord table. Atomic units map onto database
transactions, and reads inside a transaction take row locks so that
concurrent read-modify-write sequences on the same key are serialized.

An absent row cannot be locked, so the first write to a balance is
guarded by the brand row instead: every ledger operation reads its
brand records (locking them, in ascending id order) before it touches
a balance of those brands. The brand row acts as the per-brand mutex.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, ContextManager, Optional

from django.db import transaction
from django.utils import timezone

from core.domain.storage import StorageKey, StorageScope
from core.infrastructure.models import LedgerRecord, RetentionLease
from core.ports.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


class DjangoKeyValueStore(KeyValueStore):
    """
    Django ORM implementation of KeyValueStore.

    This adapter:
    1. Encodes structured keys to the record primary key
    2. Locks rows read inside an atomic unit (SELECT ... FOR UPDATE)
    3. Keeps one retention lease per storage scope
    """

    def __init__(self, using: str = "default"):
        """Initialize store bound to a database alias."""
        self.using = using

    def get(self, key: StorageKey) -> Optional[Any]:
        """
        Read a value.

        Args:
            key: Structured storage key

        Returns:
            Stored value or None if absent
        """
        # pylint: disable=no-member
        qs = LedgerRecord.objects.using(self.using).filter(key=key.encode())
        if transaction.get_connection(self.using).in_atomic_block:
            qs = qs.select_for_update()
        values = list(qs.values_list("value", flat=True))
        return values[0] if values else None

    def set(self, key: StorageKey, value: Any) -> None:
        """
        Write a value.

        Args:
            key: Structured storage key
            value: JSON-compatible value
        """
        # pylint: disable=no-member
        LedgerRecord.objects.using(self.using).update_or_create(
            key=key.encode(),
            defaults={"tag": key.tag.value, "value": value},
        )

    def extend_retention(
        self, scope: StorageScope, min_ttl_seconds: int, extend_to_seconds: int
    ) -> None:
        """
        Extend the lifetime of a storage scope.

        Args:
            scope: Retention scope
            min_ttl_seconds: Threshold below which to extend
            extend_to_seconds: New lifetime in seconds
        """
        now = timezone.now()
        with transaction.atomic(using=self.using):
            # pylint: disable=no-member
            lease = (
                RetentionLease.objects.using(self.using)
                .select_for_update()
                .filter(scope=scope.value)
                .first()
            )
            if lease and lease.expires_at - now >= timedelta(seconds=min_ttl_seconds):
                return
            expires_at = now + timedelta(seconds=extend_to_seconds)
            RetentionLease.objects.using(self.using).update_or_create(
                scope=scope.value,
                defaults={"expires_at": expires_at, "extended_at": now},
            )
        logger.debug("Retention for %s extended to %s", scope, expires_at.isoformat())

    def expires_at(self, scope: StorageScope) -> Optional[datetime]:
        """
        Return when a scope's retention lapses.

        Args:
            scope: Retention scope

        Returns:
            Expiry time or None if never extended
        """
        # pylint: disable=no-member
        lease = RetentionLease.objects.using(self.using).filter(scope=scope.value).first()
        return lease.expires_at if lease else None

    def atomic(self) -> ContextManager[None]:
        """Open a database transaction."""
        return transaction.atomic(using=self.using)
