"""
RegisterBrandCommand.

Command to register a new brand.
"""

from dataclasses import dataclass


@dataclass
class RegisterBrandCommand:
    """Command to register a brand."""

    brand_name: str
