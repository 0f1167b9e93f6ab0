"""
Unit tests for BrandRegistry.
"""
from brands.domain.brand import Brand
from core.domain.storage import StorageKey


class TestBrandRegistry:
    """Tests for BrandRegistry."""

    def test_sequential_ids(self, brand_registry):
        """Test ids are assigned 1, 2, 3 in registration order."""
        ids = [brand_registry.register_brand(name) for name in ("Amazon", "Apple", "Tesla")]
        assert ids == [1, 2, 3]
        assert brand_registry.get_brand_count() == 3

    def test_duplicate_names_allowed(self, brand_registry):
        """Test names need not be unique."""
        assert brand_registry.register_brand("Amazon") == 1
        assert brand_registry.register_brand("Amazon") == 2

    def test_empty_name_allowed(self, brand_registry):
        """Test an empty name registers."""
        brand_id = brand_registry.register_brand("")
        assert brand_registry.view_brand(brand_id).brand_name == ""

    def test_view_registered_brand(self, brand_registry):
        """Test a registered brand is active with its name."""
        brand_id = brand_registry.register_brand("Amazon")
        assert brand_registry.view_brand(brand_id) == Brand(brand_id, "Amazon", True)

    def test_view_unknown_brand(self, brand_registry):
        """Test unknown ids return the sentinel."""
        brand_registry.register_brand("Amazon")
        assert brand_registry.view_brand(0) == Brand.not_found()
        assert brand_registry.view_brand(2) == Brand.not_found()
        assert brand_registry.view_brand(-5) == Brand.not_found()

    def test_count_starts_at_zero(self, brand_registry):
        """Test an empty registry has count 0."""
        assert brand_registry.get_brand_count() == 0
        assert brand_registry.list_brands() == []

    def test_list_brands(self, brand_registry):
        """Test brands list in id order."""
        brand_registry.register_brand("Amazon")
        brand_registry.register_brand("Apple")
        assert [brand.brand_name for brand in brand_registry.list_brands()] == ["Amazon", "Apple"]

    def test_storage_layout(self, brand_registry, store):
        """Test brand records and counter share the store."""
        brand_registry.register_brand("Amazon")
        assert store.get(StorageKey.brand_count()) == 1
        assert store.get(StorageKey.brand(1)) == {
            "brand_id": 1,
            "brand_name": "Amazon",
            "is_active": True,
        }
