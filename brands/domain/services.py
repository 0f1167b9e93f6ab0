"""
Brand domain services.

The brand registry allocates ids and answers brand lookups.
"""

import logging
from typing import List

from brands.domain.brand import Brand
from brands.ports.brand_repository import BrandRepository

logger = logging.getLogger(__name__)


class BrandRegistry:
    """
    Domain service owning brand identity allocation and brand metadata.

    Ids come from a single monotonic counter, so the registered ids are
    always exactly 1..get_brand_count().
    """

    def __init__(self, repository: BrandRepository):
        """Initialize registry with its repository."""
        self.repository = repository

    def register_brand(self, brand_name: str) -> int:
        """
        Register a new active brand.

        The counter read, increment and both writes must run inside one
        atomic unit of the underlying store.

        Args:
            brand_name: Brand display name, stored verbatim

        Returns:
            The new brand id
        """
        brand_id = self.repository.get_count() + 1
        brand = Brand.create(brand_id=brand_id, brand_name=brand_name)
        self.repository.save(brand)
        self.repository.save_count(brand_id)
        logger.info("Brand registered with ID: %s", brand_id, extra={"brand_id": brand_id})
        return brand_id

    def view_brand(self, brand_id: int) -> Brand:
        """
        Look up a brand.

        Args:
            brand_id: Brand id

        Returns:
            The brand, or the not-found sentinel if never registered
        """
        if brand_id <= 0:
            return Brand.not_found()
        return self.repository.find_by_id(brand_id) or Brand.not_found()

    def get_brand_count(self) -> int:
        """Return the number of registered brands."""
        return self.repository.get_count()

    def list_brands(self) -> List[Brand]:
        """Return every registered brand in id order."""
        return [self.view_brand(brand_id) for brand_id in range(1, self.get_brand_count() + 1)]
