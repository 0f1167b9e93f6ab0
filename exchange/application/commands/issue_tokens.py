"""
IssueTokensCommand.

Command to credit points to a user for a brand.
"""

from dataclasses import dataclass


@dataclass
class IssueTokensCommand:
    """Command to issue points."""

    user: str
    brand_id: int
    amount: int
