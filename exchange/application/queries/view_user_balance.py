"""
ViewUserBalanceQuery.

Query for a user's balance with one brand.
"""
from dataclasses import dataclass


@dataclass
class ViewUserBalanceQuery:
    """Query for one balance entry."""

    user: str
    brand_id: int
