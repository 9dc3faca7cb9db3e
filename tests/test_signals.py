"""Unit tests for the signal extractors."""

import pytest

from app.scoring.signals import (
    compute_budget_adherence,
    compute_recurring_coverage,
    compute_savings_progress,
    compute_spending_trend,
    total_expenses,
    total_income,
)
from tests.factories import budget, expense, goal, income, recurring, transfer


def test_totals_ignore_other_types() -> None:
    """Income and expense totals only count their own transaction type."""
    transactions = [income(1000), expense(200), expense(50), transfer(300)]
    if total_income(transactions) != pytest.approx(1000):
        msg = f"Expected income 1000, got {total_income(transactions)}"
        raise AssertionError(msg)
    if total_expenses(transactions) != pytest.approx(250):
        msg = f"Expected expenses 250, got {total_expenses(transactions)}"
        raise AssertionError(msg)


def test_budget_adherence_without_budgets_is_vacuous() -> None:
    """No budgets at all yields perfect adherence."""
    result = compute_budget_adherence([expense(500)], [], 5, 2025)
    if result != 1:
        msg = f"Expected 1, got {result}"
        raise AssertionError(msg)


def test_budget_adherence_ignores_budgets_of_other_months() -> None:
    """Budgets outside the requested (month, year) do not count."""
    budgets = [budget(100, month=4), budget(100, year=2024)]
    result = compute_budget_adherence([expense(500)], budgets, 5, 2025)
    if result != 1:
        msg = f"Expected 1 for no matching budgets, got {result}"
        raise AssertionError(msg)


@pytest.mark.parametrize(
    ("spent", "expected"),
    [(0, 1.0), (50, 0.5), (100, 0.0), (200, 0.0), (10_000, 0.0)],
)
def test_budget_adherence_single_budget(spent: float, expected: float) -> None:
    """Adherence is 1 - spent/amount, floored at zero when overspent."""
    transactions = [expense(spent)] if spent else []
    result = compute_budget_adherence(transactions, [budget(100)], 5, 2025)
    if result != pytest.approx(expected):
        msg = f"Expected {expected} for spent={spent}, got {result}"
        raise AssertionError(msg)


def test_budget_adherence_only_counts_matching_expense_category() -> None:
    """Income and expenses in other categories do not consume a budget."""
    transactions = [expense(25, "groceries"), expense(25, "groceries"), expense(80, "rent"), income(100, category_id="groceries")]
    result = compute_budget_adherence(transactions, [budget(100, "groceries")], 5, 2025)
    if result != pytest.approx(0.5):
        msg = f"Expected 0.5, got {result}"
        raise AssertionError(msg)


def test_budget_adherence_is_unweighted_mean() -> None:
    """Each budget counts equally regardless of its size."""
    budgets = [budget(1000, "rent"), budget(10, "coffee")]
    transactions = [expense(0.0, "rent"), expense(20, "coffee")]
    result = compute_budget_adherence(transactions, budgets, 5, 2025)
    if result != pytest.approx(0.5):
        msg = f"Expected mean of 1 and 0, got {result}"
        raise AssertionError(msg)


def test_budget_adherence_guards_non_positive_budget_amount() -> None:
    """A zero budget scores 1 when untouched and 0 once anything is spent."""
    untouched = compute_budget_adherence([], [budget(0)], 5, 2025)
    spent = compute_budget_adherence([expense(1)], [budget(0)], 5, 2025)
    if (untouched, spent) != (1.0, 0.0):
        msg = f"Expected (1.0, 0.0), got {(untouched, spent)}"
        raise AssertionError(msg)


def test_savings_progress_without_goals_is_vacuous() -> None:
    """No goals yields full progress."""
    result = compute_savings_progress([], [])
    if result != 1:
        msg = f"Expected 1, got {result}"
        raise AssertionError(msg)


def test_savings_progress_counts_all_income_toward_every_goal() -> None:
    """All income approximates contributions to each goal independently."""
    transactions = [income(300), income(200), expense(400)]
    result = compute_savings_progress(transactions, [goal(1000), goal(250)])
    if result != pytest.approx((0.5 + 1.0) / 2):
        msg = f"Expected 0.75, got {result}"
        raise AssertionError(msg)


def test_savings_progress_without_income_is_zero() -> None:
    """Goals with no income in the snapshot have no progress."""
    result = compute_savings_progress([expense(100)], [goal(500)])
    if result != 0:
        msg = f"Expected 0, got {result}"
        raise AssertionError(msg)


def test_savings_progress_treats_non_positive_target_as_met() -> None:
    """A goal with a zero target does not divide by zero."""
    result = compute_savings_progress([], [goal(0)])
    if result != 1:
        msg = f"Expected 1, got {result}"
        raise AssertionError(msg)


def test_spending_trend_without_previous_spending_is_neutral() -> None:
    """No previous expenses yields a neutral trend even with income present."""
    result = compute_spending_trend([expense(500)], [income(1000)])
    if result != 0:
        msg = f"Expected 0, got {result}"
        raise AssertionError(msg)


@pytest.mark.parametrize(
    ("current", "previous", "expected"),
    [(150, 100, 0.5), (50, 100, -0.5), (0, 100, -1.0), (100, 100, 0.0), (600, 100, 5.0)],
)
def test_spending_trend_relative_change(current: float, previous: float, expected: float) -> None:
    """Trend is the relative change in expenses from the previous period."""
    current_transactions = [expense(current)] if current else []
    result = compute_spending_trend(current_transactions, [expense(previous)])
    if result != pytest.approx(expected):
        msg = f"Expected {expected}, got {result}"
        raise AssertionError(msg)


def test_recurring_coverage_without_income_is_zero() -> None:
    """No income means zero coverage, not a vacuous default."""
    result = compute_recurring_coverage([expense(10)], [])
    if result != 0:
        msg = f"Expected 0, got {result}"
        raise AssertionError(msg)


def test_recurring_coverage_caps_at_one() -> None:
    """Income above the recurring total yields full coverage."""
    result = compute_recurring_coverage([income(2000)], [recurring(500), recurring(20, is_subscription=True)])
    if result != 1:
        msg = f"Expected 1, got {result}"
        raise AssertionError(msg)


def test_recurring_coverage_partial() -> None:
    """Income below the recurring total yields the income/recurring ratio."""
    result = compute_recurring_coverage([income(300)], [recurring(400)])
    if result != pytest.approx(0.75):
        msg = f"Expected 0.75, got {result}"
        raise AssertionError(msg)


def test_recurring_coverage_counts_subscriptions_and_monthly_only() -> None:
    """Yearly non-subscription records are excluded from the recurring total."""
    records = [
        recurring(100, frequency="yearly", billing_cycle="yearly"),
        recurring(200, frequency="yearly", billing_cycle="yearly", is_subscription=True),
        recurring(200, frequency="monthly"),
    ]
    result = compute_recurring_coverage([income(200)], records)
    if result != pytest.approx(0.5):
        msg = f"Expected 200/400, got {result}"
        raise AssertionError(msg)


def test_recurring_coverage_zero_expense_quirk_uses_divisor_of_one() -> None:
    """Known quirk: with no recurring expense the divisor is 1, so coverage equals min(1, income)."""
    small = compute_recurring_coverage([income(0.4)], [])
    large = compute_recurring_coverage([income(1000)], [])
    if small != pytest.approx(0.4):
        msg = f"Expected 0.4 for income below 1, got {small}"
        raise AssertionError(msg)
    if large != 1:
        msg = f"Expected 1, got {large}"
        raise AssertionError(msg)


def test_recurring_coverage_floors_small_recurring_total_at_one() -> None:
    """A recurring total between 0 and 1 is divided as 1, not as its own value."""
    result = compute_recurring_coverage([income(0.4)], [recurring(0.5)])
    if result != pytest.approx(0.4):
        msg = f"Expected 0.4, got {result}"
        raise AssertionError(msg)
