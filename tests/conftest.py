"""Shared fixtures: settings on a temporary SQLite store and a TestClient."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from tasklist_api.app.core.config import Settings
from tasklist_api.app.core.db import Database
from tasklist_api.app.main import create_app


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def app_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a fresh SQLite file."""
    return Settings(
        database_url=sqlite_url(tmp_path / "tasks.db"),
        cors_origins="http://localhost:5173",
        db_pool_size=5,
    )


@pytest.fixture
def client(app_settings: Settings) -> Generator[TestClient, None, None]:
    """TestClient running the app lifespan against the temporary store."""
    with TestClient(create_app(app_settings)) as test_client:
        yield test_client


@pytest.fixture
def broken_settings(tmp_path: Path) -> Settings:
    """Settings whose store cannot be opened (parent directory is missing)."""
    return Settings(database_url=sqlite_url(tmp_path / "missing" / "tasks.db"))


@pytest_asyncio.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    """Initialised database handle, disposed after the test."""
    db = Database(sqlite_url(tmp_path / "service.db"), pool_size=2)
    await db.init()
    try:
        yield db
    finally:
        await db.dispose()
