"""
RegisterBrandHandler.

Handler for registering a brand.
"""

from asgiref.sync import sync_to_async

from brands.application.commands.register_brand import RegisterBrandCommand
from brands.application.dto.brand_dto import BrandDTO
from brands.domain.brand import Brand
from brands.domain.events import BrandRegistered
from brands.domain.services import BrandRegistry
from brands.ports.brand_repository import BrandRepository
from core.infrastructure.events import event_bus
from core.infrastructure.retention import RetentionExtender
from core.ports.key_value_store import KeyValueStore


class RegisterBrandHandler:
    """Handler for RegisterBrandCommand."""

    def __init__(
        self,
        store: KeyValueStore,
        brand_repository: BrandRepository,
        retention: RetentionExtender,
    ):
        """Initialize handler with store, repository and retention."""
        self.store = store
        self.registry = BrandRegistry(brand_repository)
        self.retention = retention

    async def handle(self, command: RegisterBrandCommand) -> BrandDTO:
        """
        Handle register brand command.

        The id allocation commits on its own, independent of anything
        the caller does afterwards.

        Args:
            command: RegisterBrandCommand

        Returns:
            BrandDTO of the new brand
        """
        brand = await sync_to_async(self._register)(command.brand_name)
        await sync_to_async(self.retention.extend)()

        await event_bus.publish(
            BrandRegistered(brand_id=brand.brand_id, brand_name=brand.brand_name)
        )

        return BrandDTO.from_entity(brand)

    def _register(self, brand_name: str) -> Brand:
        """Allocate the id and store the brand as one atomic unit."""
        with self.store.atomic():
            brand_id = self.registry.register_brand(brand_name)
            return self.registry.view_brand(brand_id)
