"""Insight codes for weak signals.

The generator only emits structured codes. ``describe_insight`` gives the plain sentence shown on the
dashboard; any rotating or humorous copy is chosen by the presentation layer.
"""

from app.core.models import InsightCode, ScoreBreakdown

BUDGET_ADHERENCE_FLOOR = 0.5
SAVINGS_PROGRESS_FLOOR = 0.3
SPENDING_TREND_CEILING = 0.2
RECURRING_COVERAGE_FLOOR = 0.8

INSIGHT_MESSAGES: dict[InsightCode, str] = {
    InsightCode.BUDGET_ADHERENCE_LOW: "Budget adherence needs improvement",
    InsightCode.SAVINGS_BEHIND: "Savings goals are behind schedule",
    InsightCode.SPENDING_TRENDING_UP: "Spending is trending upward",
    InsightCode.RECURRING_EXPENSE_HIGH: "Recurring expenses may be too high relative to income",
}


def generate_insights(breakdown: ScoreBreakdown) -> list[InsightCode]:
    """Return the insight codes for every weak signal, in a fixed order."""
    insights: list[InsightCode] = []
    if breakdown.budget_adherence < BUDGET_ADHERENCE_FLOOR:
        insights.append(InsightCode.BUDGET_ADHERENCE_LOW)
    if breakdown.savings_progress < SAVINGS_PROGRESS_FLOOR:
        insights.append(InsightCode.SAVINGS_BEHIND)
    if breakdown.spending_trend > SPENDING_TREND_CEILING:
        insights.append(InsightCode.SPENDING_TRENDING_UP)
    if breakdown.recurring_expense_coverage < RECURRING_COVERAGE_FLOOR:
        insights.append(InsightCode.RECURRING_EXPENSE_HIGH)
    return insights


def describe_insight(code: InsightCode | str) -> str:
    """Return the dashboard sentence for an insight code."""
    return INSIGHT_MESSAGES[InsightCode(code)]
