"""Shared test fixtures."""

from __future__ import annotations

from typing import Optional, Sequence

import pytest
from httpx import ASGITransport, AsyncClient

from visitlog.core.setting import Settings
from visitlog.db.interface import DatabaseClient
from visitlog.db.models import VisitRecord
from visitlog.main import create_app

ENV = {
    "MYSQL_USER": "mysql_user",
    "MYSQL_PASSWORD": "mysql_password",
    "MYSQL_DATABASE": "mysql_database",
    "POSTGRES_USER": "postgres_user",
    "POSTGRES_PASSWORD": "postgres_password",
    "POSTGRES_DATABASE": "postgres_database",
}

UNSET_ENV = ("SQL_CLIENT", "DB_HOST", "INSTANCE_CONNECTION_NAME", "ENV_SETTING")


class StubDatabaseClient(DatabaseClient):
    """Records calls and returns canned results, optionally failing."""

    def __init__(
        self,
        results: Sequence[VisitRecord] = (),
        insert_error: Optional[BaseException] = None,
        read_error: Optional[BaseException] = None,
    ):
        self.results = list(results)
        self.insert_error = insert_error
        self.read_error = read_error
        self.inserted: list[VisitRecord] = []
        self.select_calls: list[int] = []
        self.closed = False

    async def insert(self, record: VisitRecord) -> None:
        if self.insert_error is not None:
            raise self.insert_error
        self.inserted.append(record)

    async def select_recent(self, limit: int) -> Sequence[VisitRecord]:
        self.select_calls.append(limit)
        if self.read_error is not None:
            raise self.read_error
        return self.results

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def sql_env(monkeypatch):
    """Credential variables for both engine families; SQL_CLIENT left unset."""
    for name in UNSET_ENV:
        monkeypatch.delenv(name, raising=False)
    for name, value in ENV.items():
        monkeypatch.setenv(name, value)
    return monkeypatch


@pytest.fixture
def settings():
    return Settings(_env_file=None, SQL_CLIENT="mysql", **ENV)


@pytest.fixture
def stub_client():
    return StubDatabaseClient(
        results=[VisitRecord(timestamp="1234", address_hash="abcd")]
    )


@pytest.fixture
def app(settings, stub_client):
    return create_app(settings, client=stub_client)


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
