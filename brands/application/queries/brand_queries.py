"""
Brand queries.

Queries for single brands, the brand count and the brand list.
"""
from dataclasses import dataclass


@dataclass
class ViewBrandQuery:
    """Query to look up one brand."""

    brand_id: int


@dataclass
class GetBrandCountQuery:
    """Query for the number of registered brands."""


@dataclass
class ListBrandsQuery:
    """Query for every registered brand."""
