"""
ExchangeTokensHandler.

Handler for exchanging points between brands.
"""

from asgiref.sync import sync_to_async

from brands.domain.services import BrandRegistry
from brands.ports.brand_repository import BrandRepository
from core.infrastructure.events import event_bus
from core.infrastructure.retention import RetentionExtender
from core.ports.caller_authenticator import CallerAuthenticator
from core.ports.key_value_store import KeyValueStore
from exchange.application.commands.exchange_tokens import ExchangeTokensCommand
from exchange.application.dto.exchange_dto import ExchangeResultDTO
from exchange.domain.events import TokensExchanged
from exchange.domain.services import ExchangeEngine, ExchangeResult
from ledger.ports.balance_ledger import BalanceLedger


class ExchangeTokensHandler:
    """Handler for ExchangeTokensCommand."""

    def __init__(
        self,
        store: KeyValueStore,
        brand_repository: BrandRepository,
        balance_ledger: BalanceLedger,
        authenticator: CallerAuthenticator,
        retention: RetentionExtender,
    ):
        """Initialize handler with store, collaborators and retention."""
        self.store = store
        self.engine = ExchangeEngine(
            brand_registry=BrandRegistry(brand_repository),
            balance_ledger=balance_ledger,
            authenticator=authenticator,
        )
        self.retention = retention

    async def handle(self, command: ExchangeTokensCommand) -> ExchangeResultDTO:
        """
        Handle exchange tokens command.

        The debit and the credit commit together in one atomic unit;
        no other operation can observe one without the other.

        Args:
            command: ExchangeTokensCommand

        Returns:
            ExchangeResultDTO with both resulting balances

        Raises:
            UnauthorizedError: If the caller is not the user
            InvalidAmountError: If amount <= 0
            SameBrandExchangeError: If both brands are the same
            InactiveBrandError: If either brand is unknown or inactive
            InsufficientBalanceError: If the source balance is too low
            AmountOverflowError: If the credit would overflow
        """
        result = await sync_to_async(self._exchange)(command)
        await sync_to_async(self.retention.extend)()

        await event_bus.publish(
            TokensExchanged(
                user=result.user,
                from_brand=result.from_brand,
                to_brand=result.to_brand,
                amount=result.amount,
            )
        )

        return ExchangeResultDTO(
            user=result.user,
            from_brand=result.from_brand,
            to_brand=result.to_brand,
            amount=result.amount,
            from_balance=result.from_balance,
            to_balance=result.to_balance,
        )

    def _exchange(self, command: ExchangeTokensCommand) -> ExchangeResult:
        with self.store.atomic():
            return self.engine.exchange_tokens(
                command.user,
                command.from_brand,
                command.to_brand,
                command.amount,
            )
