"""
Unit tests for the balance ledger and checked arithmetic.
"""
import pytest

from core.domain.exceptions import AmountOverflowError
from core.domain.storage import StorageKey
from ledger.domain.balance import BALANCE_MAX, BALANCE_MIN, checked_add, checked_sub


class TestKeyValueBalanceLedger:
    """Tests for KeyValueBalanceLedger."""

    def test_default_balance_is_zero(self, balance_ledger):
        """Test never-written balances read as 0."""
        assert balance_ledger.get_balance("alice", 1) == 0
        assert balance_ledger.get_balance("alice", 999) == 0

    def test_set_overwrites(self, balance_ledger, store):
        """Test set_balance stores the value unconditionally."""
        balance_ledger.set_balance("alice", 1, 100)
        balance_ledger.set_balance("alice", 1, 40)

        assert balance_ledger.get_balance("alice", 1) == 40
        assert store.get(StorageKey.balance("alice", 1)) == 40

    def test_balances_are_independent(self, balance_ledger):
        """Test entries are keyed by user and brand."""
        balance_ledger.set_balance("alice", 1, 100)

        assert balance_ledger.get_balance("alice", 2) == 0
        assert balance_ledger.get_balance("bob", 1) == 0


class TestCheckedArithmetic:
    """Tests for checked_add and checked_sub."""

    def test_in_range(self):
        """Test ordinary arithmetic."""
        assert checked_add(10, 5) == 15
        assert checked_sub(10, 15) == -5

    def test_bounds_are_inclusive(self):
        """Test the extreme values are reachable."""
        assert checked_add(BALANCE_MAX - 1, 1) == BALANCE_MAX
        assert checked_sub(BALANCE_MIN + 1, 1) == BALANCE_MIN

    def test_add_overflow(self):
        """Test overflowing addition fails closed."""
        with pytest.raises(AmountOverflowError) as exc_info:
            checked_add(BALANCE_MAX, 1)
        assert exc_info.value.code == "AMOUNT_OVERFLOW"

    def test_sub_underflow(self):
        """Test underflowing subtraction fails closed."""
        with pytest.raises(AmountOverflowError):
            checked_sub(BALANCE_MIN, 1)


class TestBalanceLedgerInvalidKeys:
    """Tests for reads of keys that cannot hold a balance."""

    @pytest.mark.parametrize("user,brand_id", [("alice", -1), ("", 1), ("", -7)])
    def test_unaddressable_balance_reads_zero(self, balance_ledger, user, brand_id):
        """Test reads for negative brands or empty users return 0."""
        assert balance_ledger.get_balance(user, brand_id) == 0
