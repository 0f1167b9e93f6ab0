"""
IssueTokensHandler.

Handler for issuing points to a user.
"""

from asgiref.sync import sync_to_async

from brands.domain.services import BrandRegistry
from brands.ports.brand_repository import BrandRepository
from core.infrastructure.events import event_bus
from core.infrastructure.retention import RetentionExtender
from core.ports.caller_authenticator import CallerAuthenticator
from core.ports.key_value_store import KeyValueStore
from exchange.application.commands.issue_tokens import IssueTokensCommand
from exchange.application.dto.exchange_dto import BalanceDTO
from exchange.domain.events import TokensIssued
from exchange.domain.services import ExchangeEngine
from ledger.domain.balance import BalanceEntry
from ledger.ports.balance_ledger import BalanceLedger


class IssueTokensHandler:
    """Handler for IssueTokensCommand."""

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

    async def handle(self, command: IssueTokensCommand) -> BalanceDTO:
        """
        Handle issue tokens command.

        Args:
            command: IssueTokensCommand

        Returns:
            BalanceDTO with the balance after issuance

        Raises:
            UnauthorizedError: If the caller is not the user
            InactiveBrandError: If the brand is unknown or inactive
            InvalidAmountError: If amount <= 0
            AmountOverflowError: If the balance would overflow
        """
        entry = await sync_to_async(self._issue)(command)
        await sync_to_async(self.retention.extend)()

        await event_bus.publish(
            TokensIssued(
                user=entry.user,
                brand_id=entry.brand_id,
                amount=command.amount,
                balance=entry.balance,
            )
        )

        return BalanceDTO(user=entry.user, brand_id=entry.brand_id, balance=entry.balance)

    def _issue(self, command: IssueTokensCommand) -> BalanceEntry:
        with self.store.atomic():
            return self.engine.issue_tokens(command.user, command.brand_id, command.amount)
