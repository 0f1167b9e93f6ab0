"""
Model registry for the core app.
"""

from core.infrastructure.models import LedgerRecord, RetentionLease  # noqa: F401
