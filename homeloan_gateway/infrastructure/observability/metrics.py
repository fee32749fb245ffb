"""Prometheus metrics for monitoring quotes, leads, and product API health"""

from prometheus_client import Counter, Histogram

# Calculator metrics
quote_counter = Counter(
    "homeloan_quote_total",
    "Total mortgage quotes computed",
    ["eligibility"],  # eligible | ineligible | no_income
)

# Lead metrics
lead_counter = Counter(
    "homeloan_lead_total",
    "Contact form submissions",
    ["outcome"],  # accepted | rejected | error
)

# Product API metrics
product_fetch_latency_histogram = Histogram(
    "product_fetch_latency_seconds",
    "Product catalogue response time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

product_fetch_failures_counter = Counter(
    "product_fetch_failures_total",
    "Failed product catalogue calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_quote(is_eligible: bool, ratio_percent: int | None) -> None:
    """Record quote outcome for monitoring eligibility rates"""
    if ratio_percent is None:
        outcome = "no_income"
    else:
        outcome = "eligible" if is_eligible else "ineligible"
    quote_counter.labels(eligibility=outcome).inc()


def record_lead(outcome: str) -> None:
    lead_counter.labels(outcome=outcome).inc()
