"""DB models and read-only snapshot access for the Performance Score service."""

from datetime import date
from functools import lru_cache

from sqlalchemy import Boolean, Column, Date, Integer, Numeric, String, Text, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.models import Budget, RecurringTransaction, SavingsGoal, Transaction

Base = declarative_base()

MONEY = Numeric(12, 2, asdecimal=False)


class TransactionRow(Base):
    """A stored income, expense or transfer entry."""

    __tablename__ = "transactions"
    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    account_id = Column(String, nullable=True)
    type = Column(String, nullable=False)
    category_id = Column(String, nullable=False)
    amount = Column(MONEY, nullable=False)
    date = Column(Date, nullable=False, index=True)
    notes = Column(Text, nullable=True)


class BudgetRow(Base):
    """A stored monthly category budget."""

    __tablename__ = "budgets"
    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    category_id = Column(String, nullable=False)
    amount = Column(MONEY, nullable=False)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)


class SavingsGoalRow(Base):
    """A stored savings goal."""

    __tablename__ = "savings_goals"
    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    target_amount = Column(MONEY, nullable=False)
    target_date = Column(Date, nullable=False)


class RecurringTransactionRow(Base):
    """A stored recurring transaction or subscription."""

    __tablename__ = "recurring_transactions"
    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    category_id = Column(String, nullable=True)
    amount = Column(MONEY, nullable=False)
    frequency = Column(String, nullable=False, default="monthly")
    billing_cycle = Column(String, nullable=False, default="monthly")
    is_subscription = Column(Boolean, nullable=False, default=False)
    vendor_name = Column(String, nullable=True)


@lru_cache
def get_engine(url: str | None = None) -> Engine:
    """Create (once per URL) a SQLAlchemy engine, defaulting to the configured database URL."""
    if url is None:
        from app.core.settings import get_settings

        url = get_settings().database_url
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


def init_db(engine: Engine) -> None:
    """Create the record tables if they do not exist yet."""
    Base.metadata.create_all(engine)


@lru_cache
def get_session_factory(url: str) -> sessionmaker:
    """Create (once per URL) the session factory bound to that URL's engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine(url))


def get_db() -> "SnapshotRepository":
    """Get a SnapshotRepository bound to a fresh session on the configured database."""
    from app.core.settings import get_settings

    return SnapshotRepository(get_session_factory(get_settings().database_url)())


class SnapshotRepository:
    """Read-only queries that assemble one user's records for a scoring call."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def transactions_between(self, user_id: str, start: date, end: date) -> list[Transaction]:
        """Return the user's transactions dated within [start, end], oldest first."""
        stmt = (
            select(TransactionRow)
            .where(TransactionRow.user_id == user_id, TransactionRow.date >= start, TransactionRow.date <= end)
            .order_by(TransactionRow.date, TransactionRow.id)
        )
        return [Transaction.model_validate(row) for row in self.session.scalars(stmt)]

    def budgets_for(self, user_id: str, month: int, year: int) -> list[Budget]:
        """Return the user's budgets for one (month, year)."""
        stmt = (
            select(BudgetRow)
            .where(BudgetRow.user_id == user_id, BudgetRow.month == month, BudgetRow.year == year)
            .order_by(BudgetRow.id)
        )
        return [Budget.model_validate(row) for row in self.session.scalars(stmt)]

    def savings_goals(self, user_id: str) -> list[SavingsGoal]:
        """Return all of the user's savings goals."""
        stmt = select(SavingsGoalRow).where(SavingsGoalRow.user_id == user_id).order_by(SavingsGoalRow.id)
        return [SavingsGoal.model_validate(row) for row in self.session.scalars(stmt)]

    def recurring_transactions(self, user_id: str, *, subscriptions_only: bool = False) -> list[RecurringTransaction]:
        """Return the user's recurring transactions, optionally only subscriptions."""
        stmt = select(RecurringTransactionRow).where(RecurringTransactionRow.user_id == user_id)
        if subscriptions_only:
            stmt = stmt.where(RecurringTransactionRow.is_subscription.is_(True))
        stmt = stmt.order_by(RecurringTransactionRow.id)
        return [RecurringTransaction.model_validate(row) for row in self.session.scalars(stmt)]

    def close(self) -> None:
        """Close the SQLAlchemy session."""
        self.session.close()
