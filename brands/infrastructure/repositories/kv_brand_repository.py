"""
Key-value implementation of BrandRepository port.

This adapter converts between Brand entities and store records.
"""

from typing import Any, Dict, Optional

from brands.domain.brand import Brand
from brands.ports.brand_repository import BrandRepository
from core.domain.storage import StorageKey
from core.ports.key_value_store import KeyValueStore


class KeyValueBrandRepository(BrandRepository):
    """
    KeyValueStore implementation of BrandRepository.

    This adapter:
    1. Stores brands under brand:<id> keys
    2. Stores the counter under the brand_count key
    3. Converts records to domain entities
    """

    def __init__(self, store: KeyValueStore):
        """Initialize repository with a store."""
        self.store = store

    def _to_domain(self, record: Dict[str, Any]) -> Brand:
        """
        Convert a stored record to a domain entity.

        Args:
            record: Stored brand record

        Returns:
            Brand domain entity
        """
        return Brand(
            brand_id=int(record["brand_id"]),
            brand_name=record["brand_name"],
            is_active=bool(record["is_active"]),
        )

    def _to_record(self, brand: Brand) -> Dict[str, Any]:
        """
        Convert a domain entity to a stored record.

        Args:
            brand: Brand domain entity

        Returns:
            JSON-compatible record
        """
        return {
            "brand_id": brand.brand_id,
            "brand_name": brand.brand_name,
            "is_active": brand.is_active,
        }

    def save(self, brand: Brand) -> Brand:
        self.store.set(StorageKey.brand(brand.brand_id), self._to_record(brand))
        return brand

    def find_by_id(self, brand_id: int) -> Optional[Brand]:
        record = self.store.get(StorageKey.brand(brand_id))
        if record is None:
            return None
        return self._to_domain(record)

    def get_count(self) -> int:
        count = self.store.get(StorageKey.brand_count())
        return int(count) if count is not None else 0

    def save_count(self, count: int) -> None:
        self.store.set(StorageKey.brand_count(), count)
