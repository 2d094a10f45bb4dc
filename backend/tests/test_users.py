"""
Tests for PUT /users/{id}.
"""

import pytest
from fastapi.testclient import TestClient

from stockroom.core.config import Settings
from stockroom.core.security import TokenSigner
from stockroom.main import create_app
from tests.conftest import TEST_SECRET, bearer, login, signup


def _user_id(token: str) -> int:
    return TokenSigner(TEST_SECRET, max_age=3600).loads(token)["id"]


class TestUpdateUser:
    """Tests for updating name, username and password."""

    def test_password_change_affects_login(self, client, token):
        user_id = _user_id(token)
        body = {"name": "Alice", "username": "alice", "password": "brand-new-pass"}

        response = client.put(f"/users/{user_id}", json=body, headers=bearer(token))

        assert response.status_code == 200
        assert response.json() == {"message": "User updated successfully"}
        assert login(client, password="s3cret-pass").status_code == 400
        assert login(client, password="brand-new-pass").status_code == 200

    def test_omitting_password_keeps_old_one(self, client, token):
        user_id = _user_id(token)

        response = client.put(
            f"/users/{user_id}",
            json={"name": "Alice Liddell", "username": "aliddell"},
            headers=bearer(token),
        )

        assert response.status_code == 200
        assert login(client, username="alice").status_code == 400
        assert login(client, username="aliddell", password="s3cret-pass").status_code == 200

    def test_requires_token(self, client):
        response = client.put("/users/1", json={"name": "X", "username": "x"})

        assert response.status_code == 401

    def test_cannot_update_another_user(self, client, token):
        signup(client, username="bob", name="Bob")
        bob_id = _user_id(login(client, username="bob").json()["token"])

        response = client.put(
            f"/users/{bob_id}",
            json={"name": "Mallory", "username": "mallory"},
            headers=bearer(token),
        )

        assert response.status_code == 403
        assert login(client, username="bob").status_code == 200

    def test_username_collision_fails(self, client, token):
        signup(client, username="bob", name="Bob")

        response = client.put(
            f"/users/{_user_id(token)}",
            json={"name": "Alice", "username": "bob"},
            headers=bearer(token),
        )

        assert response.status_code == 500
        assert response.json()["detail"] == "Error updating user"


class TestUpdateUserWithoutOwnership:
    """With ownership checks disabled any token holder may update any user."""

    @pytest.fixture
    def open_client(self, tmp_path):
        settings = Settings(
            secret_key=TEST_SECRET,
            database_url=None,
            db_host=None,
            sqlite_path=str(tmp_path / "stockroom-open.db"),
            enforce_user_ownership=False,
        )
        with TestClient(create_app(settings)) as test_client:
            yield test_client

    def test_can_update_another_user(self, open_client):
        signup(open_client)
        signup(open_client, username="bob", name="Bob")
        alice_token = login(open_client).json()["token"]
        bob_id = _user_id(login(open_client, username="bob").json()["token"])

        response = open_client.put(
            f"/users/{bob_id}",
            json={"name": "Robert", "username": "robert", "password": "changed-by-alice"},
            headers=bearer(alice_token),
        )

        assert response.status_code == 200
        assert login(open_client, username="robert", password="changed-by-alice").status_code == 200
