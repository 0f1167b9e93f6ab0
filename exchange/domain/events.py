"""
Exchange domain events.
"""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from core.domain.events import DomainEvent


class TokensIssued(DomainEvent):
    """Event raised when points are issued to a user."""

    def __init__(
        self,
        user: str,
        brand_id: int,
        amount: int,
        balance: int,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize TokensIssued event.

        Args:
            user: User identity
            brand_id: Issuing brand
            amount: Points issued
            balance: Balance after issuance
            occurred_at: When the event occurred
        """
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            aggregate_id=f"{user}:{brand_id}",
            event_type="TokensIssued",
        )
        self.user = user
        self.brand_id = brand_id
        self.amount = amount
        self.balance = balance

    def payload(self) -> Dict[str, Any]:
        return {
            "user": self.user,
            "brand_id": self.brand_id,
            "amount": self.amount,
            "balance": self.balance,
        }


class TokensExchanged(DomainEvent):
    """Event raised when points move between two brands."""

    def __init__(
        self,
        user: str,
        from_brand: int,
        to_brand: int,
        amount: int,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize TokensExchanged event.

        Args:
            user: User identity
            from_brand: Brand debited
            to_brand: Brand credited
            amount: Points moved
            occurred_at: When the event occurred
        """
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            aggregate_id=user,
            event_type="TokensExchanged",
        )
        self.user = user
        self.from_brand = from_brand
        self.to_brand = to_brand
        self.amount = amount

    def payload(self) -> Dict[str, Any]:
        return {
            "user": self.user,
            "from_brand": self.from_brand,
            "to_brand": self.to_brand,
            "amount": self.amount,
        }
