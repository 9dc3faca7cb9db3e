"""Weighted aggregation of signals into a 0-100 score and its tier."""

import math

from app.core.models import ScoreBreakdown, Tier

BUDGET_WEIGHT = 40
SAVINGS_WEIGHT = 30
TREND_WEIGHT = 10
RECURRING_WEIGHT = 10
EMERGENCY_WEIGHT = 10

# Lower bounds are inclusive; ordered from best to worst.
TIER_THRESHOLDS: tuple[tuple[float, Tier], ...] = (
    (80, Tier.EXCELLENT),
    (60, Tier.STABLE),
    (40, Tier.RISK_ZONE),
)


def normalize_trend(spending_trend: float) -> float:
    """Map a spending trend onto a goodness scale: -1 -> 1, 0 -> 0.5, +1 and above -> 0."""
    return max(0.0, 1 - (spending_trend + 1) / 2)


def aggregate(breakdown: ScoreBreakdown) -> float:
    """Combine the signals into an unrounded score clamped to [0, 100]."""
    score = (
        breakdown.budget_adherence * BUDGET_WEIGHT
        + breakdown.savings_progress * SAVINGS_WEIGHT
        + normalize_trend(breakdown.spending_trend) * TREND_WEIGHT
        + breakdown.recurring_expense_coverage * RECURRING_WEIGHT
    )
    if breakdown.emergency_savings_progress is not None:
        score += breakdown.emergency_savings_progress * EMERGENCY_WEIGHT
    else:
        # Spread the missing emergency weight proportionally over the other four signals.
        score = score * (100 / 90)
    return max(0.0, min(100.0, score))


def round_score(value: float) -> int:
    """Round half up to the nearest integer."""
    return math.floor(value + 0.5)


def classify(score: float) -> Tier:
    """Return the tier for a score."""
    for lower_bound, tier in TIER_THRESHOLDS:
        if score >= lower_bound:
            return tier
    return Tier.CRITICAL
