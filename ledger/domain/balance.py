"""
Balance domain model.

A balance entry is the number of points one user holds for one brand.
Balances are signed 64-bit integers; arithmetic that would leave that
range fails closed instead of wrapping.
"""

from dataclasses import dataclass

from core.domain.exceptions import AmountOverflowError

BALANCE_MIN = -(2**63)
BALANCE_MAX = 2**63 - 1


@dataclass(frozen=True)
class BalanceEntry:
    """Points held by a user for a brand."""

    user: str
    brand_id: int
    balance: int


def checked_add(balance: int, amount: int) -> int:
    """
    Add within the signed 64-bit range.

    Raises:
        AmountOverflowError: If the result is out of range
    """
    result = balance + amount
    if not BALANCE_MIN <= result <= BALANCE_MAX:
        raise AmountOverflowError(f"Balance {balance} + {amount} overflows")
    return result


def checked_sub(balance: int, amount: int) -> int:
    """
    Subtract within the signed 64-bit range.

    Raises:
        AmountOverflowError: If the result is out of range
    """
    result = balance - amount
    if not BALANCE_MIN <= result <= BALANCE_MAX:
        raise AmountOverflowError(f"Balance {balance} - {amount} overflows")
    return result
