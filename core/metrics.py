"""
Prometheus metrics for the licensing service.

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
    "Total license activation attempts",
    ["package_name", "outcome"],
)

license_status_checks_total = Counter(
    "license_status_checks_total",
    "Total license status checks",
    ["status"],
)

# Licensing authority metrics
licensing_authority_request_duration_seconds = Histogram(
    "licensing_authority_request_duration_seconds",
    "Licensing authority request duration in seconds",
    ["endpoint"],
    buckets=[0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
)
