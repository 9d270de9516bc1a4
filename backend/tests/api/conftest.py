"""API test fixtures — seeded in-memory data layer behind the FastAPI TestClient.

Invariants:
    - Every test gets a fresh in-memory SQLite database, seeded with the literal dataset
    - get_showcase dependency overridden; lifespan is not run
    - db_manager patched so the readiness probe sees the test database

Design Decisions:
    - TestClient (httpx) over a live server: sync routes, no event loop fixtures needed
"""

import pytest
from fastapi.testclient import TestClient

import showcase.infrastructure.database as db_module
from showcase.infrastructure.database import DatabaseSessionManager
from showcase.infrastructure.document_persistence import SqlDocumentPersistence
from showcase.main import app
from showcase.services.bootstrap import build_showcase, get_showcase


@pytest.fixture
def test_db_manager():
    manager = DatabaseSessionManager("sqlite://")
    manager.create_tables()
    yield manager
    manager.dispose()


@pytest.fixture
def wired(test_db_manager):
    return build_showcase(SqlDocumentPersistence(test_db_manager))


@pytest.fixture
def client(wired, test_db_manager, monkeypatch):
    app.dependency_overrides[get_showcase] = lambda: wired
    monkeypatch.setattr(db_module, "db_manager", test_db_manager)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def login(client):
    """POST /auth/login and return the raw response."""
    def _login(username: str, password: str):
        return client.post(
            "/api/v1/auth/login", json={"username": username, "password": password},
        )
    return _login


@pytest.fixture
def as_admin(client, login):
    assert login("a", "a").status_code == 200
    return client


@pytest.fixture
def as_jane(client, login):
    assert login("teacher1", "password").status_code == 200
    return client
