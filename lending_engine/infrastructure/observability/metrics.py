"""Prometheus metrics for risk outcomes, allocations, and request latency"""

from prometheus_client import Counter, Histogram

risk_assessment_counter = Counter(
    "lending_risk_assessment_total",
    "Lender risk assessments performed",
    ["risk_level"],  # low | medium | high
)

allocation_counter = Counter(
    "lending_allocation_total",
    "Portfolio allocations recommended",
    ["risk_tolerance"],
)

diversification_score_histogram = Histogram(
    "lending_diversification_score",
    "Distribution of portfolio diversification scores",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

invalid_input_counter = Counter(
    "lending_invalid_input_total",
    "Calls rejected because of invalid numeric or category input",
    ["operation"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_assessment(risk_level: str) -> None:
    risk_assessment_counter.labels(risk_level=risk_level).inc()


def record_allocation(risk_tolerance: str) -> None:
    allocation_counter.labels(risk_tolerance=risk_tolerance).inc()


def record_diversification(score: int) -> None:
    diversification_score_histogram.observe(score)


def record_invalid_input(operation: str) -> None:
    invalid_input_counter.labels(operation=operation).inc()
