"""
Prometheus metrics for the license service.

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
licenses_added_total = Counter(
    "licenses_added_total",
    "Total licenses added",
    ["product"],
)

licenses_deleted_total = Counter(
    "licenses_deleted_total",
    "Total licenses deleted",
    ["product"],
)

license_verifications_total = Counter(
    "license_verifications_total",
    "License verifications by outcome",
    ["result"],
)

# Account metrics
accounts_registered_total = Counter(
    "accounts_registered_total",
    "Total accounts registered",
)

login_attempts_total = Counter(
    "login_attempts_total",
    "Login attempts by outcome",
    ["result"],
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
