"""FastAPI dependencies for DI (settings, snapshot repository, services).

This module provides dependency injection helpers for settings, the read-only snapshot repository, and
the report services, enabling modular and testable API endpoints.
"""

from collections.abc import Iterator

from fastapi import Depends

from app.core.db import SnapshotRepository, get_db
from app.services.dashboard_service import DashboardService
from app.services.monthly_wrap_service import MonthlyWrapService


def get_repository() -> Iterator[SnapshotRepository]:
    """Provide a snapshot repository for the duration of one request."""
    repository = get_db()
    try:
        yield repository
    finally:
        repository.close()


def get_dashboard_service(repository: SnapshotRepository = Depends(get_repository)) -> DashboardService:
    """Provide a DashboardService instance for dependency injection."""
    return DashboardService(repository)


def get_monthly_wrap_service(repository: SnapshotRepository = Depends(get_repository)) -> MonthlyWrapService:
    """Provide a MonthlyWrapService instance for dependency injection."""
    return MonthlyWrapService(repository)
