"""
Balance ledger port (interface).

The ledger is a dumb, total store of balances: reads default to zero
and writes are unconditional. Business rules live in the exchange engine.
"""

from abc import ABC, abstractmethod


class BalanceLedger(ABC):
    """
    Abstract mapping from (user, brand_id) to a signed balance.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    def get_balance(self, user: str, brand_id: int) -> int:
        """
        Read a balance.

        Args:
            user: User identity
            brand_id: Brand id

        Returns:
            Stored balance, 0 if never written
        """
        pass

    @abstractmethod
    def set_balance(self, user: str, brand_id: int, value: int) -> None:
        """
        Overwrite a balance without validation.

        Args:
            user: User identity
            brand_id: Brand id
            value: New balance
        """
        pass
