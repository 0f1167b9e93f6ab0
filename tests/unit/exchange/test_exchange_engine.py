"""
Unit tests for ExchangeEngine.
"""
import pytest

from brands.domain.brand import Brand
from brands.domain.services import BrandRegistry
from brands.infrastructure.repositories.kv_brand_repository import KeyValueBrandRepository
from core.domain.exceptions import (
    AmountOverflowError,
    InactiveBrandError,
    InsufficientBalanceError,
    InvalidAmountError,
    SameBrandExchangeError,
    UnauthorizedError,
)
from core.infrastructure.authentication import authenticated_caller
from exchange.domain.services import ExchangeEngine
from ledger.domain.balance import BALANCE_MAX

USER = "GUSER0001"


@pytest.fixture
def as_user():
    """Fixture binding USER as the authenticated caller."""
    with authenticated_caller(USER):
        yield USER


class TestIssueTokens:
    """Tests for ExchangeEngine.issue_tokens."""

    def test_issue_credits_balance(self, exchange_engine, two_brands, as_user):
        """Test issuing adds to the user's balance."""
        amazon, _ = two_brands

        exchange_engine.issue_tokens(USER, amazon, 100)
        entry = exchange_engine.issue_tokens(USER, amazon, 50)

        assert entry.balance == 150
        assert exchange_engine.view_user_balance(USER, amazon) == 150

    def test_issue_to_unknown_brand(self, exchange_engine, two_brands, as_user):
        """Test issuing for an unregistered brand."""
        with pytest.raises(InactiveBrandError) as exc_info:
            exchange_engine.issue_tokens(USER, 99, 100)
        assert exc_info.value.code == "INACTIVE_BRAND"

    def test_issue_to_inactive_brand(
        self, exchange_engine, brand_repository, two_brands, as_user
    ):
        """Test issuing for a deactivated brand."""
        amazon, _ = two_brands
        brand_repository.save(Brand(brand_id=amazon, brand_name="Amazon", is_active=False))

        with pytest.raises(InactiveBrandError):
            exchange_engine.issue_tokens(USER, amazon, 100)
        assert exchange_engine.view_user_balance(USER, amazon) == 0

    @pytest.mark.parametrize("amount", [0, -1, -1000])
    def test_issue_invalid_amount(self, exchange_engine, two_brands, as_user, amount):
        """Test non-positive amounts are rejected."""
        amazon, _ = two_brands

        with pytest.raises(InvalidAmountError):
            exchange_engine.issue_tokens(USER, amazon, amount)
        assert exchange_engine.view_user_balance(USER, amazon) == 0

    def test_inactive_brand_checked_before_amount(self, exchange_engine, as_user):
        """Test brand activity is checked before the amount."""
        with pytest.raises(InactiveBrandError):
            exchange_engine.issue_tokens(USER, 1, 0)

    def test_issue_overflow(self, exchange_engine, two_brands, as_user):
        """Test issuing past the maximum balance fails closed."""
        amazon, _ = two_brands
        exchange_engine.issue_tokens(USER, amazon, BALANCE_MAX)

        with pytest.raises(AmountOverflowError):
            exchange_engine.issue_tokens(USER, amazon, 1)
        assert exchange_engine.view_user_balance(USER, amazon) == BALANCE_MAX

    def test_issue_requires_caller(self, exchange_engine, two_brands):
        """Test issuing without an authenticated caller."""
        amazon, _ = two_brands

        with pytest.raises(UnauthorizedError):
            exchange_engine.issue_tokens(USER, amazon, 100)
        assert exchange_engine.view_user_balance(USER, amazon) == 0

    def test_issue_for_other_user(self, exchange_engine, two_brands):
        """Test a caller cannot receive points for another user."""
        amazon, _ = two_brands

        with authenticated_caller("GOTHER"):
            with pytest.raises(UnauthorizedError):
                exchange_engine.issue_tokens(USER, amazon, 100)
        assert exchange_engine.view_user_balance(USER, amazon) == 0

    def test_unauthorized_checked_first(self, exchange_engine):
        """Test authentication precedes all other validation."""
        with pytest.raises(UnauthorizedError):
            exchange_engine.issue_tokens(USER, 99, 0)


class TestExchangeTokens:
    """Tests for ExchangeEngine.exchange_tokens."""

    def test_exchange_conserves_total(self, exchange_engine, two_brands, as_user):
        """Test an exchange moves points 1:1."""
        amazon, apple = two_brands
        exchange_engine.issue_tokens(USER, amazon, 300)
        exchange_engine.issue_tokens(USER, apple, 20)

        result = exchange_engine.exchange_tokens(USER, amazon, apple, 120)

        assert (result.from_balance, result.to_balance) == (180, 140)
        assert result.from_balance + result.to_balance == 320
        assert exchange_engine.view_user_balance(USER, amazon) == 180
        assert exchange_engine.view_user_balance(USER, apple) == 140

    def test_exchange_entire_balance(self, exchange_engine, two_brands, as_user):
        """Test exchanging exactly the available balance."""
        amazon, apple = two_brands
        exchange_engine.issue_tokens(USER, amazon, 10)

        result = exchange_engine.exchange_tokens(USER, amazon, apple, 10)

        assert (result.from_balance, result.to_balance) == (0, 10)

    @pytest.mark.parametrize(
        "from_brand,to_brand,amount,error",
        [
            (1, 2, 0, InvalidAmountError),
            (1, 2, -5, InvalidAmountError),
            (1, 1, 10, SameBrandExchangeError),
            (1, 3, 10, InactiveBrandError),
            (3, 1, 10, InactiveBrandError),
            (0, 2, 10, InactiveBrandError),
            (1, 2, 101, InsufficientBalanceError),
        ],
    )
    def test_rejections_leave_balances_unchanged(
        self, exchange_engine, two_brands, as_user, from_brand, to_brand, amount, error
    ):
        """Test every rejection path leaves both balances untouched."""
        amazon, apple = two_brands
        exchange_engine.issue_tokens(USER, amazon, 100)
        exchange_engine.issue_tokens(USER, apple, 7)

        with pytest.raises(error):
            exchange_engine.exchange_tokens(USER, from_brand, to_brand, amount)

        assert exchange_engine.view_user_balance(USER, amazon) == 100
        assert exchange_engine.view_user_balance(USER, apple) == 7

    def test_amount_checked_before_same_brand(self, exchange_engine, two_brands, as_user):
        """Test the amount rule precedes the same-brand rule."""
        with pytest.raises(InvalidAmountError):
            exchange_engine.exchange_tokens(USER, 1, 1, 0)

    def test_exchange_overflow(self, exchange_engine, two_brands, as_user):
        """Test a credit past the maximum fails before any write."""
        amazon, apple = two_brands
        exchange_engine.issue_tokens(USER, amazon, 10)
        exchange_engine.issue_tokens(USER, apple, BALANCE_MAX)

        with pytest.raises(AmountOverflowError):
            exchange_engine.exchange_tokens(USER, amazon, apple, 10)

        assert exchange_engine.view_user_balance(USER, amazon) == 10
        assert exchange_engine.view_user_balance(USER, apple) == BALANCE_MAX

    def test_exchange_requires_caller(self, exchange_engine, balance_ledger, two_brands):
        """Test exchanging without an authenticated caller."""
        amazon, apple = two_brands
        balance_ledger.set_balance(USER, amazon, 100)

        with authenticated_caller("GOTHER"):
            with pytest.raises(UnauthorizedError):
                exchange_engine.exchange_tokens(USER, amazon, apple, 50)

        assert balance_ledger.get_balance(USER, amazon) == 100
        assert balance_ledger.get_balance(USER, apple) == 0


class TestViewUserBalance:
    """Tests for ExchangeEngine.view_user_balance."""

    def test_unknown_balance_reads_zero(self, exchange_engine):
        """Test never-written balances read as 0 without a caller."""
        assert exchange_engine.view_user_balance(USER, 5) == 0

    @pytest.mark.parametrize("user,brand_id", [(USER, -1), ("", 1)])
    def test_invalid_keys_read_zero(self, exchange_engine, user, brand_id):
        """Test reads never fail for negative brands or empty users."""
        assert exchange_engine.view_user_balance(user, brand_id) == 0


class RecordingBrandRepository(KeyValueBrandRepository):
    """Brand repository recording lookup order."""

    def __init__(self, store):
        super().__init__(store)
        self.lookups = []

    def find_by_id(self, brand_id):
        self.lookups.append(brand_id)
        return super().find_by_id(brand_id)


class TestBrandLookupOrder:
    """Tests for the order in which exchanges read brand records."""

    @pytest.mark.parametrize("from_brand,to_brand", [(1, 2), (2, 1)])
    def test_brands_read_in_ascending_order(
        self, store, balance_ledger, authenticator, as_user, from_brand, to_brand
    ):
        """Test both directions lock the brand records in the same order."""
        repository = RecordingBrandRepository(store)
        registry = BrandRegistry(repository)
        registry.register_brand("Amazon")
        registry.register_brand("Apple")
        balance_ledger.set_balance(USER, from_brand, 10)
        engine = ExchangeEngine(
            brand_registry=registry,
            balance_ledger=balance_ledger,
            authenticator=authenticator,
        )
        repository.lookups.clear()

        engine.exchange_tokens(USER, from_brand, to_brand, 5)

        assert repository.lookups == [1, 2]


class TestScenarios:
    """End-to-end scenarios across registry and engine."""

    def test_amazon_apple(self, exchange_engine, brand_registry, as_user):
        """Test issue then exchange between two new brands."""
        assert brand_registry.register_brand("Amazon") == 1
        assert brand_registry.register_brand("Apple") == 2

        exchange_engine.issue_tokens(USER, 1, 1000)
        exchange_engine.exchange_tokens(USER, 1, 2, 500)

        assert exchange_engine.view_user_balance(USER, 1) == 500
        assert exchange_engine.view_user_balance(USER, 2) == 500

    def test_tesla_spacex_insufficient_balance(self, exchange_engine, brand_registry, as_user):
        """Test an oversized exchange fails and changes nothing."""
        assert brand_registry.register_brand("Tesla") == 1
        assert brand_registry.register_brand("SpaceX") == 2

        exchange_engine.issue_tokens(USER, 1, 100)
        with pytest.raises(InsufficientBalanceError):
            exchange_engine.exchange_tokens(USER, 1, 2, 500)

        assert exchange_engine.view_user_balance(USER, 1) == 100
        assert exchange_engine.view_user_balance(USER, 2) == 0
