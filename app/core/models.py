"""Pydantic models for the Performance Score service.

This module defines the read-only financial records the scoring engine consumes (transactions, budgets,
savings goals, recurring transactions), the snapshot and result shapes of a scoring call, and the
dashboard and monthly wrap summaries built around it. Records use the store's snake_case column names;
the scoring and summary models are exchanged in camelCase on the wire.
"""

from datetime import date
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Tier(StrEnum):
    """Ordered categorical label derived from a final score."""

    EXCELLENT = "excellent"
    STABLE = "stable"
    RISK_ZONE = "riskZone"
    CRITICAL = "critical"


class InsightCode(StrEnum):
    """Stable identifier for one weak-signal condition."""

    BUDGET_ADHERENCE_LOW = "BUDGET_ADHERENCE_LOW"
    SAVINGS_BEHIND = "SAVINGS_BEHIND"
    SPENDING_TRENDING_UP = "SPENDING_TRENDING_UP"
    RECURRING_EXPENSE_HIGH = "RECURRING_EXPENSE_HIGH"


class Record(BaseModel):
    """Base class for records loaded from the store."""

    model_config = ConfigDict(from_attributes=True, frozen=True)


class Transaction(Record):
    """A single income, expense or transfer entry."""

    id: str
    account_id: str | None = None
    type: Literal["income", "expense", "transfer"]
    category_id: str
    amount: float
    date: date
    notes: str | None = None


class Budget(Record):
    """A spending limit for one category in one (month, year)."""

    id: str
    category_id: str
    amount: float
    month: int
    year: int


class SavingsGoal(Record):
    """A savings target with a due date."""

    id: str
    name: str
    target_amount: float
    target_date: date


class RecurringTransaction(Record):
    """A recurring expense template or subscription, never materialized here."""

    id: str
    category_id: str | None = None
    amount: float
    frequency: Literal["daily", "weekly", "monthly", "yearly", "custom"] = "monthly"
    billing_cycle: Literal["monthly", "yearly", "custom"] = "monthly"
    is_subscription: bool = False
    vendor_name: str | None = None


class CamelModel(BaseModel):
    """Base class for models exchanged with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScoreInputs(CamelModel):
    """A point-in-time snapshot of one user's records for a scoring call."""

    transactions_current_period: list[Transaction] = Field(default_factory=list)
    transactions_previous_period: list[Transaction] = Field(default_factory=list)
    budgets: list[Budget] = Field(default_factory=list)
    savings_goals: list[SavingsGoal] = Field(default_factory=list)
    recurring_transactions: list[RecurringTransaction] = Field(default_factory=list)
    month: int = Field(ge=1, le=12)
    year: int
    emergency_savings_progress: float | None = Field(default=None, ge=0, le=1)


class ScoreBreakdown(CamelModel):
    """The raw signals a score was computed from."""

    budget_adherence: float
    savings_progress: float
    spending_trend: float
    recurring_expense_coverage: float
    emergency_savings_progress: float | None = None


class ScoreResult(CamelModel):
    """Final score, its tier, the signals behind it and the weak-signal insights."""

    score: int
    tier: Tier
    breakdown: ScoreBreakdown
    insights: list[InsightCode]


class DashboardSummary(CamelModel):
    """Current-month figures shown next to the performance score."""

    month: int
    year: int
    total_income: float
    total_expenses: float
    net_savings: float
    subscription_count: int
    monthly_subscription_total: float
    performance: ScoreResult


class CategorySpend(CamelModel):
    """Total expense amount for one category."""

    id: str
    name: str | None = None
    amount: float


class MonthlyWrap(CamelModel):
    """Summary of an arbitrary past month."""

    month: int
    year: int
    total_income: float
    total_expenses: float
    net_savings: float
    subscription_total: float
    top_category: CategorySpend | None = None
    lowest_category: CategorySpend | None = None
    performance_score: int
    transaction_count: int
