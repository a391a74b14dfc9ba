"""Prometheus metrics for monitoring projection outcomes and latency"""

from prometheus_client import Counter, Histogram

# Projection metrics
projection_counter = Counter(
    "clearahead_projection_total",
    "Total lookahead projections computed",
    ["confidence"],  # High | Medium | Low
)

below_zero_counter = Counter(
    "clearahead_projection_below_zero_total",
    "Projections whose lowest balance dips below zero",
)

what_if_counter = Counter(
    "clearahead_what_if_total",
    "Projections run with a hypothetical purchase",
)

window_weeks_counter = Counter(
    "clearahead_window_weeks",
    "Projections by effective window length",
    ["weeks"],
)

projection_duration_histogram = Histogram(
    "clearahead_projection_duration_seconds",
    "Time spent computing a lookahead",
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1],
)


def record_projection(confidence: str, below_zero: bool, window_weeks: int, duration_seconds: float) -> None:
    """Record projection metrics for monitoring confidence and overdraft rates"""
    projection_counter.labels(confidence=confidence).inc()
    if below_zero:
        below_zero_counter.inc()
    window_weeks_counter.labels(weeks=str(window_weeks)).inc()
    projection_duration_histogram.observe(duration_seconds)
