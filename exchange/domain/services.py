"""
Exchange domain services.

The exchange engine validates and applies issue and exchange operations
on top of the brand registry and the balance ledger. It holds no state
of its own; callers run each operation inside one atomic store unit.
"""

import logging
from dataclasses import dataclass

from brands.domain.services import BrandRegistry
from core.domain.exceptions import (
    InactiveBrandError,
    InsufficientBalanceError,
    InvalidAmountError,
    SameBrandExchangeError,
)
from core.ports.caller_authenticator import CallerAuthenticator
from ledger.domain.balance import BalanceEntry, checked_add, checked_sub
from ledger.ports.balance_ledger import BalanceLedger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExchangeResult:
    """Balances of both brands after an exchange."""

    user: str
    from_brand: int
    to_brand: int
    amount: int
    from_balance: int
    to_balance: int


class ExchangeEngine:
    """
    Domain service for issuing and exchanging points.

    Every operation authenticates first and validates completely
    before the first write, so a rejected operation touches no balance.
    """

    def __init__(
        self,
        brand_registry: BrandRegistry,
        balance_ledger: BalanceLedger,
        authenticator: CallerAuthenticator,
    ):
        """Initialize engine with its collaborators."""
        self.brand_registry = brand_registry
        self.balance_ledger = balance_ledger
        self.authenticator = authenticator

    def issue_tokens(self, user: str, brand_id: int, amount: int) -> BalanceEntry:
        """
        Credit new points to a user for a brand.

        Args:
            user: User identity, must be the authenticated caller
            brand_id: Issuing brand
            amount: Points to credit

        Returns:
            The user's balance entry after the credit

        Raises:
            UnauthorizedError: If the caller is not ``user``
            InactiveBrandError: If the brand is unknown or inactive
            InvalidAmountError: If amount <= 0
            AmountOverflowError: If the new balance is out of range
        """
        self.authenticator.require_authorized(user)

        brand = self.brand_registry.view_brand(brand_id)
        if not brand.is_active:
            raise InactiveBrandError(f"Brand {brand_id} is not active")
        if amount <= 0:
            raise InvalidAmountError()

        current = self.balance_ledger.get_balance(user, brand_id)
        new_balance = checked_add(current, amount)
        self.balance_ledger.set_balance(user, brand_id, new_balance)

        logger.info(
            "Issued %s tokens from brand %s to user",
            amount,
            brand_id,
            extra={"brand_id": brand_id, "amount": amount},
        )
        return BalanceEntry(user=user, brand_id=brand_id, balance=new_balance)

    def exchange_tokens(
        self, user: str, from_brand: int, to_brand: int, amount: int
    ) -> ExchangeResult:
        """
        Move points between two brands of the same user at 1:1.

        Args:
            user: User identity, must be the authenticated caller
            from_brand: Brand debited
            to_brand: Brand credited
            amount: Points moved

        Returns:
            ExchangeResult with both resulting balances

        Raises:
            UnauthorizedError: If the caller is not ``user``
            InvalidAmountError: If amount <= 0
            SameBrandExchangeError: If from_brand == to_brand
            InactiveBrandError: If either brand is unknown or inactive
            InsufficientBalanceError: If the source balance is below amount
            AmountOverflowError: If a resulting balance is out of range
        """
        self.authenticator.require_authorized(user)

        if amount <= 0:
            raise InvalidAmountError()
        if from_brand == to_brand:
            raise SameBrandExchangeError()

        # Brand reads lock the brand rows; ascending id order keeps
        # opposite-direction exchanges from deadlocking.
        brands = {
            brand_id: self.brand_registry.view_brand(brand_id)
            for brand_id in sorted((from_brand, to_brand))
        }
        if not brands[from_brand].is_active or not brands[to_brand].is_active:
            raise InactiveBrandError("One or both brands are not active")

        from_balance = self.balance_ledger.get_balance(user, from_brand)
        if from_balance < amount:
            raise InsufficientBalanceError(
                f"Insufficient balance: {from_balance} available, {amount} requested"
            )
        to_balance = self.balance_ledger.get_balance(user, to_brand)

        # Both results are computed before either write.
        new_from_balance = checked_sub(from_balance, amount)
        new_to_balance = checked_add(to_balance, amount)
        self.balance_ledger.set_balance(user, from_brand, new_from_balance)
        self.balance_ledger.set_balance(user, to_brand, new_to_balance)

        logger.info(
            "Exchanged %s tokens from brand %s to brand %s",
            amount,
            from_brand,
            to_brand,
            extra={"from_brand": from_brand, "to_brand": to_brand, "amount": amount},
        )
        return ExchangeResult(
            user=user,
            from_brand=from_brand,
            to_brand=to_brand,
            amount=amount,
            from_balance=new_from_balance,
            to_balance=new_to_balance,
        )

    def view_user_balance(self, user: str, brand_id: int) -> int:
        """Return a user's balance for a brand, 0 if never written."""
        return self.balance_ledger.get_balance(user, brand_id)
