"""
Retention extension issued after successful mutations.
"""

import logging

from django.conf import settings

from core.domain.storage import RetentionPolicy, StorageScope
from core.ports.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


def retention_policy_from_settings() -> RetentionPolicy:
    """
    Build the retention policy from the LOYALTY_LEDGER setting.

    Returns:
        RetentionPolicy instance
    """
    config = getattr(settings, "LOYALTY_LEDGER", {})
    return RetentionPolicy(
        scope=StorageScope(config.get("RETENTION_SCOPE", StorageScope.INSTANCE.value)),
        min_ttl_seconds=int(config.get("RETENTION_MIN_TTL_SECONDS", 100000)),
        extend_to_seconds=int(config.get("RETENTION_EXTEND_TO_SECONDS", 100000)),
    )


class RetentionExtender:
    """Applies a RetentionPolicy to a store."""

    def __init__(self, store: KeyValueStore, policy: RetentionPolicy):
        """Initialize extender with store and policy."""
        self.store = store
        self.policy = policy

    def extend(self) -> bool:
        """
        Extend retention of the policy's scope.

        A failed extension is a retention risk only: it is logged and
        reported, never raised.

        Returns:
            True if the store accepted the extension
        """
        try:
            self.store.extend_retention(
                self.policy.scope,
                self.policy.min_ttl_seconds,
                self.policy.extend_to_seconds,
            )
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning(
                "Retention extension failed for scope %s: %s",
                self.policy.scope,
                e,
                exc_info=True,
            )
            return False
        return True
