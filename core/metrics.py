"""
Prometheus metrics for the loyalty exchange service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Ledger metrics
brands_registered_total = Counter(
    "brands_registered_total",
    "Total brands registered",
)

tokens_issued_total = Counter(
    "tokens_issued_total",
    "Total points issued",
)

tokens_exchanged_total = Counter(
    "tokens_exchanged_total",
    "Total points moved by exchanges",
)

# Error metrics
ledger_rejections_total = Counter(
    "ledger_rejections_total",
    "Operations rejected by a domain rule",
    ["error_code"],
)
