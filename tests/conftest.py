from __future__ import annotations

import itertools
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from app.api.deps import CurrentUser, get_anon_datastore, get_current_user
from app.core.rate_limit import reset_rate_limits
from app.core.supabase_client import DataStoreError
from app.main import app


class InMemoryDataStore:
    """Stands in for the hosted backend: tables are lists of dicts."""

    def __init__(self):
        self.tables: dict[str, list[dict]] = {"services": [], "staff": [], "bookings": []}
        self.users: dict[str, dict] = {}
        self.tokens: list[Optional[str]] = []
        self.signed_out: list[str] = []
        self.fail_with: Optional[DataStoreError] = None
        self._ids = itertools.count(1)

    def for_token(self, access_token: str) -> "InMemoryDataStore":
        self.tokens.append(access_token)
        return self

    def _check(self):
        if self.fail_with:
            raise self.fail_with

    def seed(self, table: str, *rows: dict):
        for row in rows:
            row = dict(row)
            row.setdefault("id", f"{table}-{next(self._ids)}")
            self.tables[table].append(row)

    def select(self, table, *, filters=None, order=None):
        self._check()
        rows = list(self.tables[table])
        for column, op, value in filters or ():
            if op == "eq":
                rows = [r for r in rows if str(r.get(column)) == str(value)]
            elif op == "gte":
                rows = [r for r in rows if r.get(column) >= value]
            elif op == "lte":
                rows = [r for r in rows if r.get(column) <= value]
        for column in reversed(list(order or ())):
            rows.sort(key=lambda r: r.get(column) or "")
        return [dict(r) for r in rows]

    def insert(self, table, row):
        self._check()
        row = {"id": f"{table}-{next(self._ids)}", **row}
        self.tables[table].append(row)
        return dict(row)

    def update(self, table, row, *, match):
        self._check()
        updated = []
        for existing in self.tables[table]:
            if all(str(existing.get(k)) == str(v) for k, v in match.items()):
                existing.update(row)
                updated.append(dict(existing))
        return updated

    def delete(self, table, *, match):
        self._check()
        self.tables[table] = [
            r for r in self.tables[table]
            if not all(str(r.get(k)) == str(v) for k, v in match.items())
        ]

    def sign_up(self, email: str, password: str) -> dict[str, Any]:
        self._check()
        if email in self.users:
            raise DataStoreError("User already registered", 422)
        user = {"id": f"user-{next(self._ids)}", "email": email}
        self.users[email] = {**user, "password": password}
        return user

    def sign_in_with_password(self, email: str, password: str) -> dict[str, Any]:
        self._check()
        stored = self.users.get(email)
        if not stored or stored["password"] != password:
            raise DataStoreError("Invalid login credentials", 400)
        return {
            "access_token": f"token-{stored['id']}",
            "refresh_token": "refresh",
            "user": {"id": stored["id"], "email": email},
        }

    def sign_out(self):
        self._check()
        self.signed_out.append(self.tokens[-1] if self.tokens else None)


OWNER = CurrentUser(id="owner-1", email="owner@salon.com", access_token="owner-token")


@pytest.fixture
def datastore():
    return InMemoryDataStore()


@pytest.fixture
def client(datastore):
    reset_rate_limits()
    app.dependency_overrides[get_anon_datastore] = lambda: datastore
    app.dependency_overrides[get_current_user] = lambda: OWNER
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def anon_client(datastore):
    reset_rate_limits()
    app.dependency_overrides[get_anon_datastore] = lambda: datastore
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
