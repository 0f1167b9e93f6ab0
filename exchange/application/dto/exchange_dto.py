"""
Exchange DTOs for API responses.
"""
from dataclasses import dataclass


@dataclass
class BalanceDTO:
    """DTO for a single balance."""

    user: str
    brand_id: int
    balance: int


@dataclass
class ExchangeResultDTO:
    """DTO for exchange response."""

    user: str
    from_brand: int
    to_brand: int
    amount: int
    from_balance: int
    to_balance: int
