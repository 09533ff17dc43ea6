"""
Pytest fixtures for PassOP tests. Uses a temporary SQLite store (STORE_BACKEND=sql).
"""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture
def sql_store_env(tmp_path, monkeypatch):
    """
    Point the service at a temporary SQLite file. Unset DATABASE_URL so a developer
    .env or shell cannot redirect tests to a real database.
    """
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("STORE_BACKEND", "sql")
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "passop.db"))
    return tmp_path / "passop.db"


@pytest.fixture
def password_store(sql_store_env):
    """Connected PasswordStore on the temporary SQLite file; closed after the test."""
    from backend_passop.database import get_store

    store = get_store()
    asyncio.run(store.connect())
    yield store
    asyncio.run(store.close())


@pytest.fixture
def client(sql_store_env):
    """FastAPI TestClient. Entered as a context manager so the lifespan opens the temp store."""
    from fastapi.testclient import TestClient

    from backend_passop.api_server.server import app

    with TestClient(app) as test_client:
        yield test_client
