"""Signal extractors for the performance score.

Each extractor reduces a set of records to one ratio. Empty collections and zero divisors resolve to
fixed defaults instead of raising, so a user who has not set up budgets or goals yet is not penalized.
Callers are expected to pass records already scoped to one user and one period.
"""

from collections.abc import Iterable

from app.core.models import Budget, RecurringTransaction, SavingsGoal, Transaction


def _sum_of_type(transactions: Iterable[Transaction], kind: str) -> float:
    return sum((t.amount for t in transactions if t.type == kind), 0.0)


def total_income(transactions: Iterable[Transaction]) -> float:
    """Sum the amounts of income transactions."""
    return _sum_of_type(transactions, "income")


def total_expenses(transactions: Iterable[Transaction]) -> float:
    """Sum the amounts of expense transactions."""
    return _sum_of_type(transactions, "expense")


def compute_budget_adherence(
    transactions: Iterable[Transaction], budgets: Iterable[Budget], month: int, year: int
) -> float:
    """Return the mean per-budget adherence for (month, year), in [0, 1].

    A budget spent to 50% scores 0.5, one exactly met scores 0 and overspending floors at 0.
    No budgets for the month means 1. Budgets are averaged without weighting by size.
    """
    relevant = [b for b in budgets if b.month == month and b.year == year]
    if not relevant:
        return 1.0

    expenses = [t for t in transactions if t.type == "expense"]
    total = 0.0
    for budget in relevant:
        spent = sum((t.amount for t in expenses if t.category_id == budget.category_id), 0.0)
        if budget.amount <= 0:
            total += 0.0 if spent > 0 else 1.0
            continue
        total += max(0.0, 1 - spent / budget.amount)
    return total / len(relevant)


def compute_savings_progress(transactions: Iterable[Transaction], goals: Iterable[SavingsGoal]) -> float:
    """Return the mean progress across savings goals, in [0, 1].

    There is no ledger linking transactions to goals, so all income in the snapshot counts as a
    contribution to every goal. No goals means 1; a goal with a non-positive target counts as met.
    """
    goals = list(goals)
    if not goals:
        return 1.0

    contributions = total_income(transactions)
    total = 0.0
    for goal in goals:
        if goal.target_amount <= 0:
            total += 1.0
            continue
        total += min(1.0, contributions / goal.target_amount)
    return total / len(goals)


def compute_spending_trend(
    current_transactions: Iterable[Transaction], previous_transactions: Iterable[Transaction]
) -> float:
    """Return the relative change in expenses between two periods.

    Positive means spending grew, negative means it shrank. The value is bounded below by -1 and
    unbounded above. No previous spending gives 0.
    """
    current = total_expenses(current_transactions)
    previous = total_expenses(previous_transactions)
    if previous == 0:
        return 0.0
    return (current - previous) / previous


def compute_recurring_coverage(
    transactions: Iterable[Transaction], recurring_transactions: Iterable[RecurringTransaction]
) -> float:
    """Return how well income covers recurring expenses, in [0, 1].

    Subscriptions and monthly-frequency records count as recurring expenses. No income gives 0.
    The recurring total is floored at 1 as a divisor, so with no recurring expense coverage equals min(1, income).
    """
    income = total_income(transactions)
    recurring = sum(
        (rt.amount for rt in recurring_transactions if rt.is_subscription or rt.frequency == "monthly"),
        0.0,
    )
    if income == 0:
        return 0.0
    return min(1.0, income / max(recurring, 1.0))
