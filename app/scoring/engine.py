"""Performance score orchestration.

This module wires the signal extractors, the aggregator, the tier classifier and the insight generator
into a single pure call. The engine holds no state and never mutates its inputs, so it is safe to share
across concurrent request handlers; the dashboard and the API both go through ``score_snapshot``.
"""

from app.core.models import ScoreBreakdown, ScoreInputs, ScoreResult
from app.core.utils import get_logger
from app.scoring.aggregate import aggregate, classify, round_score
from app.scoring.insights import generate_insights
from app.scoring.signals import (
    compute_budget_adherence,
    compute_recurring_coverage,
    compute_savings_progress,
    compute_spending_trend,
)

logger = get_logger("performance-score.engine")


def extract_signals(inputs: ScoreInputs) -> ScoreBreakdown:
    """Run every signal extractor over one snapshot."""
    current = inputs.transactions_current_period
    return ScoreBreakdown(
        budget_adherence=compute_budget_adherence(current, inputs.budgets, inputs.month, inputs.year),
        savings_progress=compute_savings_progress(current, inputs.savings_goals),
        spending_trend=compute_spending_trend(current, inputs.transactions_previous_period),
        recurring_expense_coverage=compute_recurring_coverage(current, inputs.recurring_transactions),
        emergency_savings_progress=inputs.emergency_savings_progress,
    )


def calculate_performance_score(breakdown: ScoreBreakdown) -> ScoreResult:
    """Score a set of already extracted signals."""
    raw = aggregate(breakdown)
    score = round_score(raw)
    result = ScoreResult(
        score=score,
        tier=classify(raw),
        breakdown=breakdown,
        insights=generate_insights(breakdown),
    )
    logger.debug(f"Aggregated score: raw={raw:.4f}, score={score}, tier={result.tier}")
    return result


def score_snapshot(inputs: ScoreInputs) -> ScoreResult:
    """Compute the performance score for one user's snapshot."""
    breakdown = extract_signals(inputs)
    logger.debug(
        f"Signals for {inputs.month:02d}/{inputs.year}: "
        f"budget={breakdown.budget_adherence:.4f}, savings={breakdown.savings_progress:.4f}, "
        f"trend={breakdown.spending_trend:.4f}, recurring={breakdown.recurring_expense_coverage:.4f}, "
        f"emergency={breakdown.emergency_savings_progress}"
    )
    result = calculate_performance_score(breakdown)
    logger.info(f"Performance score {result.score} ({result.tier}) with {len(result.insights)} insight(s)")
    return result
