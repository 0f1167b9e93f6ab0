"""
Brand DTOs for API responses.
"""
from dataclasses import dataclass
from typing import List

from brands.domain.brand import Brand


@dataclass
class BrandDTO:
    """DTO for brand information."""

    brand_id: int
    brand_name: str
    is_active: bool

    @classmethod
    def from_entity(cls, brand: Brand) -> "BrandDTO":
        """Build DTO from a Brand entity."""
        return cls(
            brand_id=brand.brand_id,
            brand_name=brand.brand_name,
            is_active=brand.is_active,
        )


@dataclass
class BrandCountDTO:
    """DTO for brand count response."""

    brand_count: int


@dataclass
class BrandListDTO:
    """DTO for brand list response."""

    count: int
    brands: List[BrandDTO]
