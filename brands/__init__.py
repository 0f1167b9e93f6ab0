"""
Brands module - Brand registry.

This module handles:
- Brand entity and the not-found sentinel
- Brand id allocation from a monotonic counter
- Brand repository (port) and its key-value adapter
- Register / view / count / list use cases
"""
