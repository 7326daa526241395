"""
Prometheus metrics for the license activation service.

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

# License metrics
license_activations_total = Counter(
    "license_activations_total",
    "License activation attempts by outcome",
    ["outcome"],
)

tokens_issued_total = Counter(
    "tokens_issued_total",
    "License tokens issued",
    ["license_type"],
)

token_verifications_total = Counter(
    "token_verifications_total",
    "Token verifications at the access gate by outcome",
    ["outcome"],
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
