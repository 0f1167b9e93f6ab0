"""
Brand domain events.

Domain events represent something that happened in the brand domain.
"""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from core.domain.events import DomainEvent


class BrandRegistered(DomainEvent):
    """Event raised when a brand is registered."""

    def __init__(
        self,
        brand_id: int,
        brand_name: str,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize BrandRegistered event.

        Args:
            brand_id: Allocated brand id
            brand_name: Brand name
            occurred_at: When the event occurred
        """
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            aggregate_id=str(brand_id),
            event_type="BrandRegistered",
        )
        self.brand_id = brand_id
        self.brand_name = brand_name

    def payload(self) -> Dict[str, Any]:
        return {"brand_id": self.brand_id, "brand_name": self.brand_name}
