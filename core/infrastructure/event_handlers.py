"""
Event handlers for domain events.

These handlers process domain events for side effects
like audit logging and metrics. They run after the operation has
committed and cannot change its outcome.
"""

import logging

from brands.domain.events import BrandRegistered
from core.domain.events import DomainEvent, EventHandler
from core.metrics import brands_registered_total, tokens_exchanged_total, tokens_issued_total
from exchange.domain.events import TokensExchanged, TokensIssued

logger = logging.getLogger(__name__)

_registered = False


class AuditLogEventHandler(EventHandler):
    """Writes one structured log line per domain event."""

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra=event.to_dict(),
        )


class LedgerMetricsEventHandler(EventHandler):
    """Counts ledger activity in Prometheus."""

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for metrics.

        Args:
            event: Domain event
        """
        if isinstance(event, BrandRegistered):
            brands_registered_total.inc()
        elif isinstance(event, TokensIssued):
            tokens_issued_total.inc(event.amount)
        elif isinstance(event, TokensExchanged):
            tokens_exchanged_total.inc(event.amount)


def register_event_handlers():
    """Register all event handlers with the event bus, once per process."""
    global _registered  # pylint: disable=global-statement
    if _registered:
        return

    from core.infrastructure.events import event_bus

    audit_handler = AuditLogEventHandler()
    metrics_handler = LedgerMetricsEventHandler()

    for event_type in (BrandRegistered, TokensIssued, TokensExchanged):
        event_bus.subscribe(event_type, audit_handler)
        event_bus.subscribe(event_type, metrics_handler)

    _registered = True
    logger.info("Event handlers registered")
