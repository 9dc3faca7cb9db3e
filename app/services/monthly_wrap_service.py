"""Monthly wrap: a summary report for an arbitrary month.

The wrap carries its own simplified performance score based on budget adherence alone. It reuses the
engine's budget extractor and rounding so both numbers agree on methodology for the same month.
"""

from app.core.db import SnapshotRepository
from app.core.models import CategorySpend, MonthlyWrap, Transaction
from app.core.utils import get_logger, month_bounds
from app.scoring.aggregate import round_score
from app.scoring.signals import compute_budget_adherence, total_expenses, total_income

logger = get_logger("performance-score.services")

DEFAULT_WRAP_SCORE = 50


def spending_by_category(transactions: list[Transaction]) -> dict[str, float]:
    """Sum expense amounts per category, in first-seen order."""
    spending: dict[str, float] = {}
    for t in transactions:
        if t.type == "expense":
            spending[t.category_id] = spending.get(t.category_id, 0.0) + t.amount
    return spending


class MonthlyWrapService:
    """Builds the monthly wrap report from the store."""

    def __init__(self, repository: SnapshotRepository) -> None:
        """Initialize MonthlyWrapService with a snapshot repository."""
        self.repository = repository

    def monthly_wrap(self, user_id: str, month: int, year: int) -> MonthlyWrap:
        """Summarize income, spending, subscriptions and budget performance for one month."""
        logger.info(f"Building monthly wrap: user_id={user_id}, month={month}, year={year}")
        start, end = month_bounds(month, year)
        transactions = self.repository.transactions_between(user_id, start, end)
        subscriptions = self.repository.recurring_transactions(user_id, subscriptions_only=True)
        budgets = self.repository.budgets_for(user_id, month, year)

        income = total_income(transactions)
        expenses = total_expenses(transactions)
        spending = spending_by_category(transactions)
        top = max(spending.items(), key=lambda item: item[1], default=None)
        lowest = min(spending.items(), key=lambda item: item[1], default=None)

        if budgets:
            score = round_score(compute_budget_adherence(transactions, budgets, month, year) * 100)
        else:
            score = DEFAULT_WRAP_SCORE

        return MonthlyWrap(
            month=month,
            year=year,
            total_income=income,
            total_expenses=expenses,
            net_savings=income - expenses,
            subscription_total=sum((s.amount for s in subscriptions if s.billing_cycle == "monthly"), 0.0),
            top_category=CategorySpend(id=top[0], amount=top[1]) if top else None,
            lowest_category=CategorySpend(id=lowest[0], amount=lowest[1]) if lowest else None,
            performance_score=score,
            transaction_count=len(transactions),
        )
