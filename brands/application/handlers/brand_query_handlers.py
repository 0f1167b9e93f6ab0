"""
Brand query handlers.

Read-only handlers; they never fail for unknown ids.
"""

from asgiref.sync import sync_to_async

from brands.application.dto.brand_dto import BrandCountDTO, BrandDTO, BrandListDTO
from brands.application.queries.brand_queries import (
    GetBrandCountQuery,
    ListBrandsQuery,
    ViewBrandQuery,
)
from brands.domain.services import BrandRegistry
from brands.ports.brand_repository import BrandRepository


class ViewBrandHandler:
    """Handler for ViewBrandQuery."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize handler with repository."""
        self.registry = BrandRegistry(brand_repository)

    async def handle(self, query: ViewBrandQuery) -> BrandDTO:
        """
        Handle view brand query.

        Args:
            query: ViewBrandQuery

        Returns:
            BrandDTO, the not-found sentinel for unknown ids
        """
        brand = await sync_to_async(self.registry.view_brand)(query.brand_id)
        return BrandDTO.from_entity(brand)


class GetBrandCountHandler:
    """Handler for GetBrandCountQuery."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize handler with repository."""
        self.registry = BrandRegistry(brand_repository)

    async def handle(self, query: GetBrandCountQuery) -> BrandCountDTO:
        count = await sync_to_async(self.registry.get_brand_count)()
        return BrandCountDTO(brand_count=count)


class ListBrandsHandler:
    """Handler for ListBrandsQuery."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize handler with repository."""
        self.registry = BrandRegistry(brand_repository)

    async def handle(self, query: ListBrandsQuery) -> BrandListDTO:
        brands = await sync_to_async(self.registry.list_brands)()
        return BrandListDTO(
            count=len(brands),
            brands=[BrandDTO.from_entity(brand) for brand in brands],
        )
