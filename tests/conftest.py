"""
Pytest configuration and shared fixtures.
"""

import time

import pytest

from brands.domain.services import BrandRegistry
from brands.infrastructure.repositories.kv_brand_repository import KeyValueBrandRepository
from core.domain.storage import RetentionPolicy, StorageScope
from core.infrastructure.authentication import CallerSignature, ContextCallerAuthenticator
from core.infrastructure.in_memory_key_value_store import InMemoryKeyValueStore
from core.infrastructure.retention import RetentionExtender
from exchange.domain.services import ExchangeEngine
from ledger.infrastructure.kv_balance_ledger import KeyValueBalanceLedger

TEST_SIGNING_SECRET = "test-caller-signing-secret"


@pytest.fixture
def store():
    """Fixture for an empty in-memory KeyValueStore."""
    return InMemoryKeyValueStore()


@pytest.fixture
def brand_repository(store):
    """Fixture for BrandRepository."""
    return KeyValueBrandRepository(store)


@pytest.fixture
def balance_ledger(store):
    """Fixture for BalanceLedger."""
    return KeyValueBalanceLedger(store)


@pytest.fixture
def authenticator():
    """Fixture for CallerAuthenticator bound to the caller context."""
    return ContextCallerAuthenticator()


@pytest.fixture
def retention_policy():
    """Fixture for the default RetentionPolicy."""
    return RetentionPolicy(
        scope=StorageScope.INSTANCE,
        min_ttl_seconds=100000,
        extend_to_seconds=100000,
    )


@pytest.fixture
def retention(store, retention_policy):
    """Fixture for RetentionExtender."""
    return RetentionExtender(store, retention_policy)


@pytest.fixture
def brand_registry(brand_repository):
    """Fixture for BrandRegistry."""
    return BrandRegistry(brand_repository)


@pytest.fixture
def exchange_engine(brand_registry, balance_ledger, authenticator):
    """Fixture for ExchangeEngine."""
    return ExchangeEngine(
        brand_registry=brand_registry,
        balance_ledger=balance_ledger,
        authenticator=authenticator,
    )


@pytest.fixture
def two_brands(brand_registry):
    """Fixture registering "Amazon" and "Apple"; returns their ids."""
    return brand_registry.register_brand("Amazon"), brand_registry.register_brand("Apple")


@pytest.fixture
def signed_headers():
    """Fixture building signed caller headers for the Django test client."""

    def _sign(caller_id, body=b"", timestamp=None, secret=TEST_SIGNING_SECRET):
        timestamp = str(int(time.time()) if timestamp is None else timestamp)
        return {
            "HTTP_X_CALLER_ID": caller_id,
            "HTTP_X_CALLER_TIMESTAMP": timestamp,
            "HTTP_X_CALLER_SIGNATURE": CallerSignature.generate(
                secret, caller_id, timestamp, body
            ),
        }

    return _sign


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
