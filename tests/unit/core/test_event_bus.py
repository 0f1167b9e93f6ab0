"""
Unit tests for the in-memory event bus and event handlers.
"""
import pytest
from prometheus_client import REGISTRY

from brands.domain.events import BrandRegistered
from core.domain.events import EventHandler
from core.infrastructure.event_handlers import AuditLogEventHandler, LedgerMetricsEventHandler
from core.infrastructure.events import InMemoryEventBus
from exchange.domain.events import TokensExchanged, TokensIssued


class RecordingHandler(EventHandler):
    """Collects handled events."""

    def __init__(self):
        self.events = []

    async def handle(self, event):
        self.events.append(event)


class FailingHandler(EventHandler):
    """Always fails."""

    async def handle(self, event):
        raise RuntimeError("handler failed")


@pytest.mark.asyncio
class TestInMemoryEventBus:
    """Tests for InMemoryEventBus."""

    async def test_publish_to_subscribers(self):
        """Test events reach the handlers subscribed to their type."""
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(BrandRegistered, handler)

        event = BrandRegistered(brand_id=1, brand_name="Amazon")
        await bus.publish(event)
        await bus.publish(TokensIssued(user="alice", brand_id=1, amount=5, balance=5))

        assert handler.events == [event]

    async def test_publish_without_handlers(self):
        """Test publishing with no subscribers is a no-op."""
        await InMemoryEventBus().publish(BrandRegistered(brand_id=1, brand_name="Amazon"))

    async def test_failing_handler_does_not_propagate(self):
        """Test one failing handler neither raises nor blocks others."""
        bus = InMemoryEventBus()
        recorder = RecordingHandler()
        bus.subscribe(BrandRegistered, FailingHandler())
        bus.subscribe(BrandRegistered, recorder)

        await bus.publish(BrandRegistered(brand_id=1, brand_name="Amazon"))

        assert len(recorder.events) == 1

    async def test_clear(self):
        """Test clear removes all subscriptions."""
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(BrandRegistered, handler)
        bus.clear()

        await bus.publish(BrandRegistered(brand_id=1, brand_name="Amazon"))

        assert handler.events == []

    async def test_audit_handler_logs_payload(self, caplog):
        """Test audit log lines carry the event payload."""
        caplog.set_level("INFO", logger="core.infrastructure.event_handlers")
        event = TokensExchanged(user="alice", from_brand=1, to_brand=2, amount=50)

        await AuditLogEventHandler().handle(event)

        record = caplog.records[-1]
        assert record.event_type == "TokensExchanged"
        assert record.from_brand == 1
        assert record.amount == 50


class TestDomainEvents:
    """Tests for domain event serialization."""

    def test_to_dict_includes_payload(self):
        """Test to_dict merges common fields and the payload."""
        event = TokensIssued(user="alice", brand_id=1, amount=10, balance=30)
        data = event.to_dict()
        assert data["event_type"] == "TokensIssued"
        assert data["aggregate_id"] == "alice:1"
        assert data["balance"] == 30
        assert "event_id" in data


@pytest.mark.asyncio
class TestLedgerMetricsEventHandler:
    """Tests for LedgerMetricsEventHandler."""

    async def test_counts_points_without_brand_labels(self):
        """Test issue and exchange totals are single unlabelled series."""
        issued_before = REGISTRY.get_sample_value("tokens_issued_total")
        exchanged_before = REGISTRY.get_sample_value("tokens_exchanged_total")
        handler = LedgerMetricsEventHandler()

        await handler.handle(TokensIssued(user="alice", brand_id=1, amount=7, balance=7))
        await handler.handle(TokensIssued(user="alice", brand_id=99, amount=3, balance=3))
        await handler.handle(TokensExchanged(user="alice", from_brand=1, to_brand=99, amount=5))

        assert REGISTRY.get_sample_value("tokens_issued_total") == issued_before + 10
        assert REGISTRY.get_sample_value("tokens_exchanged_total") == exchanged_before + 5
        assert REGISTRY.get_sample_value("tokens_issued_total", {"brand_id": "1"}) is None
