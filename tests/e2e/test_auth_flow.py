"""End-to-end tests for the session cookie flow."""

import pytest
from fastapi.testclient import TestClient

from autohub.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    return TestClient(create_app(container=build_test_container()))


class TestAuthFlow:
    """End-to-end tests for register, me and logout."""

    def test_register_sets_session_cookie(self, client):
        # Act
        response = client.post(
            "/auth/register", json={"name": "Ann", "email": "Ann@Example.com"}
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["email"] == "ann@example.com"
        assert response.json()["role"] == "User"
        assert "auth_token" in response.cookies

    def test_me_reflects_session(self, client):
        # Anonymous first
        assert client.get("/auth/me").json() == {"authenticated": False, "user": None}

        client.post("/auth/register", json={"name": "Ann", "email": "ann@example.com"})
        me = client.get("/auth/me").json()
        assert me["authenticated"] is True
        assert me["user"]["name"] == "Ann"

        logout = client.post("/auth/logout")
        assert logout.json() == {"success": True, "message": "Logged out successfully"}
        assert client.get("/auth/me").json()["authenticated"] is False

    def test_duplicate_registration_conflicts(self, client):
        client.post("/auth/register", json={"name": "Ann", "email": "ann@example.com"})

        response = client.post(
            "/auth/register", json={"name": "Other Ann", "email": "ANN@example.com"}
        )

        assert response.status_code == 409
        assert "already registered" in response.json()["detail"]

    def test_invalid_cookie_is_unauthorized(self, client):
        client.cookies.set("auth_token", "not-a-jwt")

        response = client.post(
            "/questions", json={"title": "Knocking", "body": "Uphill only", "tags": []}
        )

        assert response.status_code == 401

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
