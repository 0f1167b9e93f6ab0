"""
ViewUserBalanceHandler.

Handler for reading one balance; unknown entries read as 0.
"""

from asgiref.sync import sync_to_async

from exchange.application.dto.exchange_dto import BalanceDTO
from exchange.application.queries.view_user_balance import ViewUserBalanceQuery
from ledger.ports.balance_ledger import BalanceLedger


class ViewUserBalanceHandler:
    """Handler for ViewUserBalanceQuery."""

    def __init__(self, balance_ledger: BalanceLedger):
        """Initialize handler with the balance ledger."""
        self.balance_ledger = balance_ledger

    async def handle(self, query: ViewUserBalanceQuery) -> BalanceDTO:
        balance = await sync_to_async(self.balance_ledger.get_balance)(
            query.user, query.brand_id
        )
        return BalanceDTO(user=query.user, brand_id=query.brand_id, balance=balance)
