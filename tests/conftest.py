"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from core.db import get_db
from main import app


class FakeDatabase:
    """In-memory stand-in for core.db.Database.

    Queued results are returned in order; every call is recorded as
    (method, sql, args). Set `error` to make the next call raise.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []
        self.one_results: list[dict | None] = []
        self.all_results: list[list[dict]] = []
        self.error: Exception | None = None

    def _record(self, method: str, sql: str, args: tuple[Any, ...]) -> None:
        self.calls.append((method, sql, args))
        if self.error is not None:
            raise self.error

    async def fetch_one(self, sql: str, *args: Any) -> dict | None:
        self._record("fetch_one", sql, args)
        return self.one_results.pop(0) if self.one_results else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict]:
        self._record("fetch_all", sql, args)
        return self.all_results.pop(0) if self.all_results else []


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def client(fake_db):
    app.dependency_overrides[get_db] = lambda: fake_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    # Lowest cost bcrypt accepts; keeps signup/login tests quick.
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
