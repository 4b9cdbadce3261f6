"""Prometheus metrics for monitoring approval rates and approved loan sizes"""

from typing import Optional
from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | declined | rejected
)

approved_amount_bucket_counter = Counter(
    "loan_approved_amount_bucket",
    "Approved loan amounts by bucket",
    ["bucket"],  # 2000-4000, 4000-7000, 7000+
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def approved_amount_bucket(loan_amount: int) -> str:
    """Bucket label for an approved loan amount"""
    if loan_amount <= 4000:
        return "2000-4000"
    elif loan_amount <= 7000:
        return "4000-7000"
    else:
        return "7000+"


def record_decision(outcome: str, loan_amount: Optional[int]) -> None:
    """Record decision metrics for monitoring approval rates and approved amount distribution"""
    decision_counter.labels(outcome=outcome).inc()

    # Amount distribution covers approvals only
    if outcome == "approved" and loan_amount is not None:
        approved_amount_bucket_counter.labels(bucket=approved_amount_bucket(loan_amount)).inc()
