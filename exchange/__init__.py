"""
Exchange module - Point issuance and 1:1 cross-brand exchange.

This module handles:
- Exchange engine enforcing the ledger business rules
- Issue / exchange / balance use cases
- Issuance and exchange domain events
"""
