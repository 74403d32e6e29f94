"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from scheduling_admin_api.app.core.config import settings
from scheduling_admin_api.app.core.db import init_db
from scheduling_admin_api.app.core.security import create_access_token

USER_A = "11111111-1111-1111-1111-111111111111"
USER_B = "22222222-2222-2222-2222-222222222222"


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file for every test."""
    db_path = tmp_path / "test.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    monkeypatch.setattr(settings, "auth_secret", "test-secret")
    init_db()
    yield db_path


@pytest.fixture
def client():
    from scheduling_admin_api.app.main import app

    with TestClient(app) as test_client:
        yield test_client


def auth_headers(sub: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': sub})}"}


@pytest.fixture
def headers_a():
    return auth_headers(USER_A)


@pytest.fixture
def headers_b():
    return auth_headers(USER_B)


@pytest.fixture
def profile_a(client, headers_a):
    """User A with a saved profile."""
    response = client.put("/api/profile", json={"business_name": "Barbearia Alfa"}, headers=headers_a)
    assert response.status_code == 200
    return response.json()["profile"]


@pytest.fixture
def profile_b(client, headers_b):
    """User B with a saved profile."""
    response = client.put("/api/profile", json={"business_name": "Studio Beta"}, headers=headers_b)
    assert response.status_code == 200
    return response.json()["profile"]
