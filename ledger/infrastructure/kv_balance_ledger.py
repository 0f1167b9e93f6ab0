"""
Key-value implementation of BalanceLedger port.
"""

from core.domain.storage import StorageKey
from core.ports.key_value_store import KeyValueStore
from ledger.ports.balance_ledger import BalanceLedger


class KeyValueBalanceLedger(BalanceLedger):
    """Stores balances under balance:<brand_id>:<user> keys."""

    def __init__(self, store: KeyValueStore):
        """Initialize ledger with a store."""
        self.store = store

    def get_balance(self, user: str, brand_id: int) -> int:
        # No entry can exist for these; reads never fail.
        if brand_id < 0 or not user:
            return 0
        value = self.store.get(StorageKey.balance(user, brand_id))
        return int(value) if value is not None else 0

    def set_balance(self, user: str, brand_id: int, value: int) -> None:
        self.store.set(StorageKey.balance(user, brand_id), value)
