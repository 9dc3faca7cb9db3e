"""Pytest configuration: per-test SQLite store and API client.

Every test that touches the store gets its own database file under ``tmp_path``; the application
reads ``DATABASE_URL`` on each request, so pointing it at the temporary file keeps tests hermetic.
"""

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

# Keep the file log out of the working tree before main.py configures logging at import time.
os.environ.setdefault("LOG_FILE", "")

from app.core.db import Base, SnapshotRepository, get_engine, init_db  # noqa: E402


@pytest.fixture
def database_url(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Point the application at a fresh SQLite file with the record tables created."""
    url = f"sqlite:///{tmp_path / 'finance.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    init_db(get_engine(url))
    return url


@pytest.fixture
def seed(database_url: str) -> Callable[..., None]:
    """Return a helper that inserts ORM rows into the test store."""

    def _seed(*rows: Base) -> None:
        with Session(get_engine(database_url)) as session:
            session.add_all(rows)
            session.commit()

    return _seed


@pytest.fixture
def repository(database_url: str) -> Iterator[SnapshotRepository]:
    """Provide a repository bound to the test store."""
    repo = SnapshotRepository(Session(get_engine(database_url)))
    yield repo
    repo.close()


@pytest.fixture
def client(database_url: str) -> Iterator[TestClient]:
    """Provide an API client with the app lifespan running against the test store."""
    from main import app

    _ = database_url
    with TestClient(app) as test_client:
        yield test_client
