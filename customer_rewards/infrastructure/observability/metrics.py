"""Prometheus metrics for monitoring customer onboarding and reward queries"""

from prometheus_client import Counter, Histogram

# Customer metrics
customers_created_counter = Counter(
    "rewards_customers_created_total",
    "Total customers created",
)

transactions_recorded_counter = Counter(
    "rewards_transactions_recorded_total",
    "Total purchase transactions recorded",
)

# Reward query metrics
reward_query_counter = Counter(
    "rewards_queries_total",
    "Total reward queries served",
    ["outcome"],  # ok | invalid | not_found | error
)

points_awarded_histogram = Histogram(
    "rewards_points_awarded",
    "Total points returned per reward query",
    buckets=[0, 50, 100, 250, 500, 1000, 2500, 5000],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_customer_created(transaction_count: int) -> None:
    """Record onboarding metrics"""
    customers_created_counter.inc()
    transactions_recorded_counter.inc(transaction_count)


def record_reward_query(outcome: str, total_points: int | None = None) -> None:
    """Record reward query outcome and, on success, the points returned"""
    reward_query_counter.labels(outcome=outcome).inc()

    if total_points is not None:
        points_awarded_histogram.observe(total_points)
