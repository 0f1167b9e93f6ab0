"""
HTTP API layer.

Versioned DRF views, serializers and the error envelope.
"""
