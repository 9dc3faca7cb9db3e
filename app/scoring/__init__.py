"""Scoring package: signal extractors, aggregation, tiers, insights and the scoring entrypoints."""

from .aggregate import aggregate, classify, round_score  # noqa: F401
from .engine import calculate_performance_score, score_snapshot  # noqa: F401
from .insights import describe_insight, generate_insights  # noqa: F401
