"""Prometheus metrics for monitoring."""

from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, Counter, Gauge, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "keyservice_http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)

http_request_duration_seconds = Histogram(
    "keyservice_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)

# Key lifecycle metrics
key_operations_total = Counter(
    "keyservice_key_operations_total",
    "Key management operations",
    ["operation", "outcome"],  # outcome: success or not_found
)

key_verifications_total = Counter(
    "keyservice_key_verifications_total", "Key verification attempts", ["result"]
)

stored_keys = Gauge("keyservice_stored_keys", "Keys held in the store", ["status"])


def record_http_request(method: str, endpoint: str, status_code: int, duration: float):
    """Record HTTP request metrics."""
    status = f"{status_code // 100}xx"
    http_requests_total.labels(method=method, endpoint=endpoint, status=status).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)


def record_key_operation(operation: str, found: bool = True):
    """Record a list/get/create/revoke/rotate call."""
    outcome = "success" if found else "not_found"
    key_operations_total.labels(operation=operation, outcome=outcome).inc()


def record_verification(valid: bool):
    """Record the result of a verification attempt."""
    key_verifications_total.labels(result="valid" if valid else "invalid").inc()


def update_stored_keys(counts: dict):
    """Set the stored-keys gauge from a status -> count mapping."""
    for status, count in counts.items():
        stored_keys.labels(status=status).set(count)


def render_metrics() -> tuple[bytes, str]:
    """Return the exposition payload and its content type."""
    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST
