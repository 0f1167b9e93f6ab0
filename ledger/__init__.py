"""
Ledger module - Per-user, per-brand point balances.

This module handles:
- Balance entries and signed 64-bit balance arithmetic
- Balance ledger (port) and its key-value adapter
"""
