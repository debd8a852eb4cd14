"""Prometheus metrics for itinerary store operations."""

from prometheus_client import Counter, Histogram

# Store operation metrics
itinerary_operation_latency_ms = Histogram(
    "itinerary_operation_latency_ms",
    "Itinerary store operation latency in milliseconds",
    ["operation", "outcome"],
    buckets=[1, 5, 10, 25, 50, 100, 250, 500, 1000],
)

itinerary_operations_total = Counter(
    "itinerary_operations_total",
    "Total itinerary store operations",
    ["operation", "outcome"],
)

itinerary_cache_hits_total = Counter(
    "itinerary_cache_hits_total",
    "Session cache lookups",
    ["result"],
)


class PrometheusStoreMetrics:
    """Prometheus-based store metrics implementation."""

    def record_operation(self, operation: str, outcome: str, latency_ms: float) -> None:
        """Record one store operation and its latency."""
        itinerary_operations_total.labels(operation=operation, outcome=outcome).inc()
        itinerary_operation_latency_ms.labels(operation=operation, outcome=outcome).observe(
            latency_ms
        )

    def record_cache_lookup(self, hit: bool) -> None:
        """Record a session cache hit or miss."""
        itinerary_cache_hits_total.labels(result="hit" if hit else "miss").inc()
