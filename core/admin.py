"""
Django admin configuration for the ledger storage.

Records are read-only here; every change goes through the ledger
operations so their invariants hold.
"""

from django.contrib import admin

from core.domain.storage import StorageKey
from core.infrastructure.models import LedgerRecord, RetentionLease


class ReadOnlyAdmin(admin.ModelAdmin):
    """Admin without add/change/delete permissions."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(LedgerRecord)
class LedgerRecordAdmin(ReadOnlyAdmin):
    """Admin interface for LedgerRecord model."""

    list_display = ["key", "tag", "brand_id_display", "user_display", "value", "updated_at"]
    list_filter = ["tag"]
    search_fields = ["key"]
    readonly_fields = ["key", "tag", "value", "updated_at"]

    def brand_id_display(self, obj):
        """Brand id encoded in the key."""
        return StorageKey.decode(obj.key).brand_id

    brand_id_display.short_description = "Brand"

    def user_display(self, obj):
        """User identity encoded in the key."""
        return StorageKey.decode(obj.key).user or "-"

    user_display.short_description = "User"


@admin.register(RetentionLease)
class RetentionLeaseAdmin(ReadOnlyAdmin):
    """Admin interface for RetentionLease model."""

    list_display = ["scope", "expires_at", "extended_at"]
    readonly_fields = ["scope", "expires_at", "extended_at"]
