"""
ExchangeTokensCommand.

Command to move points between two brands of one user.
"""

from dataclasses import dataclass


@dataclass
class ExchangeTokensCommand:
    """Command to exchange points 1:1."""

    user: str
    from_brand: int
    to_brand: int
    amount: int
