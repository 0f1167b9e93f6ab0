"""
Brand repository port (interface).

This defines the contract for brand persistence operations.
Implementations are in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Optional

from brands.domain.brand import Brand


class BrandRepository(ABC):
    """
    Abstract repository for Brand records and the brand counter.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    def save(self, brand: Brand) -> Brand:
        """
        Save a brand entity.

        Args:
            brand: Brand entity to save

        Returns:
            Saved brand entity
        """
        pass

    @abstractmethod
    def find_by_id(self, brand_id: int) -> Optional[Brand]:
        """
        Find a brand by ID.

        Args:
            brand_id: Brand id

        Returns:
            Brand entity or None if not found
        """
        pass

    @abstractmethod
    def get_count(self) -> int:
        """
        Read the brand counter.

        Returns:
            Highest allocated brand id, 0 if none
        """
        pass

    @abstractmethod
    def save_count(self, count: int) -> None:
        """
        Store the brand counter.

        Args:
            count: New highest allocated brand id
        """
        pass
