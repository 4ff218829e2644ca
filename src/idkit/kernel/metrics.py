"""
Prometheus metrics collection for idkit.

Counts issued ids, decode outcomes and the two edge conditions of the
time-ordered generator (counter wraparound and timestamp overflow).
"""

import time
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from prometheus_client import Counter, Histogram, start_http_server

# ============================================================================
# Generation Metrics
# ============================================================================

ids_generated_total = Counter(
    "idkit_ids_generated_total",
    "Total number of identifiers generated",
    ["kind"],  # kind: random, time_ordered
)

offset_wraps_total = Counter(
    "idkit_offset_wraps_total",
    "Number of times the 16-bit offset counter wrapped back to zero",
)

timestamp_overflow_total = Counter(
    "idkit_timestamp_overflow_total",
    "Number of generation attempts rejected because the clock exceeded 48 bits",
)

# ============================================================================
# Codec Metrics
# ============================================================================

decode_total = Counter(
    "idkit_decode_total",
    "Total number of decode attempts",
    ["format", "status"],  # status: success, failure
)

operation_duration_seconds = Histogram(
    "idkit_operation_duration_seconds",
    "Duration of service operations in seconds",
    ["operation"],
    buckets=(0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05),
)

# ============================================================================
# Helper Functions
# ============================================================================

P = ParamSpec("P")
R = TypeVar("R")


def track_duration(operation: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Decorator to track operation duration.

    Args:
        operation: Name of the operation being timed

    Returns:
        Decorated function that records its duration
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                duration = time.perf_counter() - start
                operation_duration_seconds.labels(operation=operation).observe(duration)

        return wrapper

    return decorator


def record_decode(format: str, success: bool) -> None:
    """Count one decode attempt for the given format"""
    status = "success" if success else "failure"
    decode_total.labels(format=format, status=status).inc()


def start_metrics_server(port: int = 9090) -> None:
    """
    Start Prometheus metrics HTTP server.

    Args:
        port: Port to listen on (default: 9090)
    """
    start_http_server(port)
