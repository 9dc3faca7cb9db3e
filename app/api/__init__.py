"""API package: provides FastAPI dependencies and route definitions for the application."""

from .dependencies import get_dashboard_service, get_monthly_wrap_service, get_repository  # noqa: F401
from .routes import router  # noqa: F401
