"""Prometheus metrics for monitoring rating mix and score distributions"""

from typing import Dict

from prometheus_client import Counter, Histogram

# Assessment metrics
assessment_counter = Counter(
    "store_credit_assessment_total",
    "Total store assessments scored",
    ["rating"],  # Good | Average | Bad | Poor
)

# Buckets line up with the rating thresholds
total_score_histogram = Histogram(
    "store_credit_total_score",
    "Overall credit score distribution",
    buckets=[55, 70, 85, 100],
)

category_score_histogram = Histogram(
    "store_credit_category_score",
    "Sub-score distribution per category",
    ["category"],
    buckets=[20, 40, 60, 80, 100],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_category_scores(category_scores: Dict[str, int]) -> None:
    """Record each sub-score under its category label"""
    for category, score in category_scores.items():
        category_score_histogram.labels(category=category).observe(score)


def record_assessment(total: int, rating: str) -> None:
    """Record overall outcome for monitoring the rating mix"""
    assessment_counter.labels(rating=rating).inc()
    total_score_histogram.observe(total)
