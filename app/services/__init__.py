"""Services package: dashboard and monthly wrap reports built on the scoring engine."""

from .dashboard_service import DashboardService  # noqa: F401
from .monthly_wrap_service import MonthlyWrapService  # noqa: F401
