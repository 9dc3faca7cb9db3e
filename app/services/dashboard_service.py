"""Dashboard figures and performance score for the current month."""

from app.core.db import SnapshotRepository
from app.core.models import DashboardSummary, ScoreInputs
from app.core.utils import get_logger, month_bounds, previous_month
from app.scoring.engine import score_snapshot
from app.scoring.signals import total_expenses, total_income

logger = get_logger("performance-score.services")


class DashboardService:
    """Builds a consistent snapshot from the store and scores it."""

    def __init__(self, repository: SnapshotRepository) -> None:
        """Initialize DashboardService with a snapshot repository."""
        self.repository = repository

    def load_snapshot(self, user_id: str, month: int, year: int) -> ScoreInputs:
        """Fetch every collection the engine needs for one user and month."""
        start, end = month_bounds(month, year)
        prev_month, prev_year = previous_month(month, year)
        prev_start, prev_end = month_bounds(prev_month, prev_year)
        return ScoreInputs(
            transactions_current_period=self.repository.transactions_between(user_id, start, end),
            transactions_previous_period=self.repository.transactions_between(user_id, prev_start, prev_end),
            budgets=self.repository.budgets_for(user_id, month, year),
            savings_goals=self.repository.savings_goals(user_id),
            recurring_transactions=self.repository.recurring_transactions(user_id),
            month=month,
            year=year,
        )

    def performance_score(self, user_id: str, month: int, year: int) -> DashboardSummary:
        """Return the month's income, expenses, subscription figures and performance score."""
        logger.info(f"Building dashboard: user_id={user_id}, month={month}, year={year}")
        snapshot = self.load_snapshot(user_id, month, year)
        subscriptions = [rt for rt in snapshot.recurring_transactions if rt.is_subscription]
        income = total_income(snapshot.transactions_current_period)
        expenses = total_expenses(snapshot.transactions_current_period)
        return DashboardSummary(
            month=month,
            year=year,
            total_income=income,
            total_expenses=expenses,
            net_savings=income - expenses,
            subscription_count=len(subscriptions),
            monthly_subscription_total=sum((s.amount for s in subscriptions if s.billing_cycle == "monthly"), 0.0),
            performance=score_snapshot(snapshot),
        )
