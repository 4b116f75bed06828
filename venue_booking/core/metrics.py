"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Booking metrics
booking_attempts = Counter(
    'booking_attempts_total',
    'Total booking attempts',
    ['status']  # success, conflict, race_lost, duplicate, empty, not_found, error
)

booking_latency = Histogram(
    'booking_latency_seconds',
    'Booking request latency',
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)

seats_reserved = Counter(
    'seats_reserved_total',
    'Seats reserved by successful bookings'
)

booking_deletions = Counter(
    'booking_deletions_total',
    'Booking deletions',
    ['result']  # deleted, not_found
)

# Database metrics
db_operations = Counter(
    'db_operations_total',
    'Total database operations',
    ['operation']  # read, write, rollback
)

# Cache metrics
cache_operations = Counter(
    'cache_operations_total',
    'Cache operations',
    ['operation', 'result']  # get/set, hit/miss
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


# Convenience functions for instrumentation
def record_booking_attempt(status: str, seat_count: int = 0):
    """Record booking attempt. Seats are only counted for successful attempts."""
    booking_attempts.labels(status=status).inc()
    if status == "success" and seat_count:
        seats_reserved.inc(seat_count)

def record_booking_deletion(deleted: bool):
    booking_deletions.labels(result="deleted" if deleted else "not_found").inc()

def record_db_operation(operation: str):
    """Record database operation. Operation: read, write, rollback"""
    db_operations.labels(operation=operation).inc()

def record_cache_operation(operation: str, hit: bool):
    """Record cache operation."""
    result = "hit" if hit else "miss"
    cache_operations.labels(operation=operation, result=result).inc()
