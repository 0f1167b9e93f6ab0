"""
Brand domain entity.

A brand is a tenant that issues its own loyalty points.
Brands are created once by registration and never change afterwards.
"""

from dataclasses import dataclass

NOT_FOUND_BRAND_ID = 0
NOT_FOUND_BRAND_NAME = "Not_Found"


@dataclass(frozen=True)
class Brand:
    """
    Brand domain entity.

    brand_id is dense and starts at 1; id 0 is reserved for the
    not-found sentinel. The name is stored verbatim and need not
    be unique.
    """

    brand_id: int
    brand_name: str
    is_active: bool = True

    def __post_init__(self):
        """Validate brand entity."""
        if self.brand_id < 0:
            raise ValueError("Brand id cannot be negative")

    @classmethod
    def create(cls, brand_id: int, brand_name: str) -> "Brand":
        """
        Create a newly registered, active Brand.

        Args:
            brand_id: Allocated brand id
            brand_name: Brand display name

        Returns:
            Brand entity instance
        """
        if brand_id <= NOT_FOUND_BRAND_ID:
            raise ValueError("Registered brand ids start at 1")
        return cls(brand_id=brand_id, brand_name=brand_name, is_active=True)

    @classmethod
    def not_found(cls) -> "Brand":
        """Sentinel returned for ids that were never registered."""
        return cls(brand_id=NOT_FOUND_BRAND_ID, brand_name=NOT_FOUND_BRAND_NAME, is_active=False)

    @property
    def exists(self) -> bool:
        """True unless this is the not-found sentinel."""
        return self.brand_id != NOT_FOUND_BRAND_ID
