"""
Ledger storage models.

One generic record table backs the structured key-value store;
retention leases track the lifetime of each storage scope.
"""

from django.db import models


class LedgerRecord(models.Model):
    """
    A single key-value record.

    The key is the canonical StorageKey encoding; the tag column
    duplicates its key space for filtering and admin display.
    """

    key = models.CharField(max_length=400, primary_key=True)
    tag = models.CharField(max_length=20, db_index=True)
    value = models.JSONField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "core"
        db_table = "ledger_records"
        ordering = ["key"]

    def __str__(self):
        return self.key


class RetentionLease(models.Model):
    """Lifetime of a storage scope."""

    scope = models.CharField(max_length=50, primary_key=True)
    expires_at = models.DateTimeField()
    extended_at = models.DateTimeField()

    class Meta:
        app_label = "core"
        db_table = "retention_leases"

    def __str__(self):
        return f"{self.scope} until {self.expires_at.isoformat()}"
