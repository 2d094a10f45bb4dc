"""
pytest configuration and fixtures.

Every test gets its own application bound to a fresh SQLite file, so no
state leaks between tests.
"""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from stockroom.core.config import Settings
from stockroom.main import create_app


TEST_SECRET = "test-secret-key"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        secret_key=TEST_SECRET,
        database_url=None,
        db_host=None,
        sqlite_path=str(tmp_path / "stockroom-test.db"),
        enforce_user_ownership=True,
    )


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """Test client with the application lifespan (table creation) running."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


def signup(client: TestClient, username: str = "alice", password: str = "s3cret-pass", name: str = "Alice"):
    return client.post("/signup", json={"name": name, "username": username, "password": password})


def login(client: TestClient, username: str = "alice", password: str = "s3cret-pass"):
    return client.post("/login", json={"username": username, "password": password})


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def token(client: TestClient) -> str:
    """Token for a freshly registered user ``alice``."""
    assert signup(client).status_code == 201
    response = login(client)
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(token: str) -> dict[str, str]:
    return bearer(token)


@pytest.fixture
def sample_product() -> dict:
    """Sample product body."""
    return {
        "pname": "USB-C Cable",
        "description": "1m braided cable",
        "price": 9.99,
        "stock": 25,
    }
