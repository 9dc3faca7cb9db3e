"""FastAPI endpoints for the Performance Score API.

This module defines the routes for scoring a submitted snapshot, the dashboard score for a user's month,
the monthly wrap report, and health checks. It wires together the scoring engine and the report services.
"""

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_dashboard_service, get_monthly_wrap_service
from app.core.models import DashboardSummary, MonthlyWrap, ScoreInputs, ScoreResult
from app.core.utils import get_logger, utcnow
from app.scoring.engine import score_snapshot
from app.services.dashboard_service import DashboardService
from app.services.monthly_wrap_service import MonthlyWrapService

router = APIRouter()
logger = get_logger("performance-score.api")


def _resolve_period(month: int | None, year: int | None) -> tuple[int, int]:
    now = utcnow()
    return month or now.month, year or now.year


@router.post(
    "/score",
    response_model=ScoreResult,
    summary="Score a snapshot of financial records",
    description=(
        "Compute the performance score for a caller-supplied snapshot of one user's records.\n\n"
        "**Request body:** current and previous period transactions, budgets, savings goals, recurring "
        "transactions, `month`, `year` and an optional `emergencySavingsProgress` in [0, 1].\n\n"
        "**Response:**\n"
        "- 200 OK: `score` (0-100), `tier`, the signal `breakdown` and ordered `insights` codes.\n"
        "- 422 Unprocessable Entity: If the snapshot is malformed."
    ),
    response_description="Score, tier, breakdown and insights.",
    responses={
        200: {
            "description": "Snapshot scored.",
            "content": {
                "application/json": {
                    "example": {
                        "score": 94,
                        "tier": "excellent",
                        "breakdown": {
                            "budgetAdherence": 1.0,
                            "savingsProgress": 1.0,
                            "spendingTrend": 0.0,
                            "recurringExpenseCoverage": 1.0,
                            "emergencySavingsProgress": None,
                        },
                        "insights": [],
                    }
                }
            },
        },
    },
)
def score(inputs: ScoreInputs) -> ScoreResult:
    """Score a caller-supplied snapshot."""
    try:
        return score_snapshot(inputs)
    except Exception:
        logger.exception("Error in score")
        raise


@router.get(
    "/dashboard/score",
    response_model=DashboardSummary,
    summary="Get the dashboard performance score",
    description=(
        "Load the user's records for the month (and the month before) from the store and score them.\n\n"
        "**Query parameters:**\n"
        "- `user_id`: Owner of the records.\n"
        "- `month`, `year`: Period to score. Default to the current UTC month.\n\n"
        "**Response:**\n"
        "- 200 OK: Income, expenses, subscription figures and the performance score.\n"
        "- 422 Unprocessable Entity: If `month` is outside 1..12."
    ),
    response_description="Dashboard summary with performance score.",
)
def dashboard_score(
    user_id: str,
    month: int | None = Query(default=None, ge=1, le=12),
    year: int | None = Query(default=None, ge=1),
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardSummary:
    """Return the dashboard summary and performance score."""
    month, year = _resolve_period(month, year)
    try:
        return service.performance_score(user_id, month, year)
    except Exception:
        logger.exception("Error in dashboard_score")
        raise


@router.get(
    "/wraps/monthly",
    response_model=MonthlyWrap,
    summary="Get the monthly wrap",
    description=(
        "Summarize income, spending, subscriptions and budget performance for one month.\n\n"
        "**Query parameters:**\n"
        "- `user_id`: Owner of the records.\n"
        "- `month`, `year`: Period to summarize. Default to the current UTC month.\n\n"
        "**Response:**\n"
        "- 200 OK: The monthly wrap.\n"
        "- 422 Unprocessable Entity: If `month` is outside 1..12."
    ),
    response_description="Monthly wrap report.",
)
def monthly_wrap(
    user_id: str,
    month: int | None = Query(default=None, ge=1, le=12),
    year: int | None = Query(default=None, ge=1),
    service: MonthlyWrapService = Depends(get_monthly_wrap_service),
) -> MonthlyWrap:
    """Return the monthly wrap report."""
    month, year = _resolve_period(month, year)
    try:
        return service.monthly_wrap(user_id, month, year)
    except Exception:
        logger.exception("Error in monthly_wrap")
        raise


@router.get(
    "/health",
    summary="Health check",
    description="Simple health check endpoint. Returns status ok.",
    response_description="Status ok.",
    responses={200: {"description": "API is healthy.", "content": {"application/json": {"example": {"status": "ok"}}}}},
)
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}
