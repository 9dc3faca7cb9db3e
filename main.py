"""Main entrypoint and application factory for the Performance Score API.

This module initializes the FastAPI application, configures logging, creates the record tables, and exposes the Scalar API reference endpoint for interactive OpenAPI documentation. It also includes the main entrypoint for running the app with Uvicorn.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from scalar_fastapi import get_scalar_api_reference
from sqlalchemy.exc import SQLAlchemyError

from app.api.routes import router
from app.core.db import get_engine, init_db
from app.core.settings import get_settings
from app.core.utils import LOGGER_NAME, ensure_dir, get_logger


# --- Logging Setup ---
def setup_logging() -> None:
    """Configure the project logger level and its optional file handler."""
    settings = get_settings()
    level = settings.log_level.upper()
    loggers = [get_logger(LOGGER_NAME), *(get_logger(f"{LOGGER_NAME}.{child}") for child in ("engine", "api", "services"))]
    for logger in loggers:
        logger.setLevel(level)
    # Project loggers do not propagate, so each one gets the file handler
    missing = [logger for logger in loggers if not any(isinstance(h, logging.FileHandler) for h in logger.handlers)]
    if settings.log_file and missing:
        ensure_dir(Path(settings.log_file).parent)
        file_handler = logging.FileHandler(settings.log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        for logger in missing:
            logger.addHandler(file_handler)


setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifespan event handler to create the record tables using SQLAlchemy."""
    _ = app  # Silence unused argument warning
    settings = get_settings()
    try:
        init_db(get_engine(settings.database_url))
    except SQLAlchemyError:
        get_logger(LOGGER_NAME).exception("Failed to create record tables")
        raise
    yield


app = FastAPI(
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    title="Performance Score API",
    description="""
    The Performance Score API turns a snapshot of a user's transactions, budgets, savings goals and recurring expenses into a 0-100 financial performance score with a tier and insight codes.

    **Endpoints:**
    - `POST /score`: Score a caller-supplied snapshot.
    - `GET /dashboard/score`: Score the user's current month from the store.
    - `GET /wraps/monthly`: Monthly wrap report for any month.
    - `GET /health`: Health check endpoint.
    - `GET /scalar`: Interactive Scalar OpenAPI documentation.
    """,
    version="1.0.0",
)
app.include_router(router)


@app.get("/scalar", include_in_schema=False)
async def scalar_docs() -> JSONResponse:
    """Return Scalar API reference."""
    return get_scalar_api_reference(openapi_url=app.openapi_url, title=app.title)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("main:app", host=settings.server_host, port=settings.server_port, reload=True)
