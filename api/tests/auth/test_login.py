"""
Tests for POST /api/auth and GET /api/auth endpoints.

Login returns a signed token; GET returns the account behind a token.
"""

import pytest
from httpx import AsyncClient

from devconnect.auth.jwt import decode_token


class TestLoginSuccess:
    """Happy path login scenarios."""

    async def test_login_with_valid_credentials_returns_200(
        self, async_client: AsyncClient, test_user: dict
    ):
        """Login with correct email/password returns 200 and a token."""
        response = await async_client.post(
            "/api/auth",
            json={"email": test_user["email"], "password": test_user["password"]},
        )
        assert response.status_code == 200
        assert response.json()["token"]

    async def test_login_token_carries_account_id_and_name(
        self, async_client: AsyncClient, test_user: dict
    ):
        """Token payload names the logged-in account."""
        response = await async_client.post(
            "/api/auth",
            json={"email": test_user["email"], "password": test_user["password"]},
        )
        payload = decode_token(response.json()["token"])
        assert payload["sub"] == test_user["user_id"]
        assert payload["name"] == test_user["name"]

    async def test_login_email_is_case_insensitive(
        self, async_client: AsyncClient, test_user: dict
    ):
        """Email lookup ignores case."""
        response = await async_client.post(
            "/api/auth",
            json={"email": test_user["email"].upper(), "password": test_user["password"]},
        )
        assert response.status_code == 200


class TestLoginFailure:
    """Invalid credential scenarios."""

    async def test_login_wrong_password_returns_400(
        self, async_client: AsyncClient, test_user: dict
    ):
        """Wrong password yields INVALID_CREDENTIALS."""
        response = await async_client.post(
            "/api/auth",
            json={"email": test_user["email"], "password": "wrongpass"},
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"

    async def test_login_unknown_email_returns_400(self, async_client: AsyncClient):
        """Unknown email yields the same error as a wrong password."""
        response = await async_client.post(
            "/api/auth",
            json={"email": "nobody@example.com", "password": "whatever"},
        )
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid credentials"

    @pytest.mark.parametrize(
        "payload",
        [
            {"password": "secret123"},
            {"email": "test@example.com"},
            {"email": "test@example.com", "password": ""},
        ],
    )
    async def test_login_missing_fields_returns_400(
        self, async_client: AsyncClient, payload: dict
    ):
        """Email and password are both required."""
        response = await async_client.post("/api/auth", json=payload)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestCurrentAccount:
    """GET /api/auth tests."""

    async def test_get_current_account(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        """Returns the account without its password hash."""
        response = await async_client.get(
            "/api/auth", headers=auth_headers(test_user["token"])
        )
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == test_user["user_id"]
        assert data["email"] == test_user["email"]
        assert data["avatar"].startswith("https://www.gravatar.com/avatar/")
        assert "password_hash" not in data
        assert "password" not in data

    async def test_get_current_account_requires_auth(self, async_client: AsyncClient):
        """No token returns 401."""
        response = await async_client.get("/api/auth")
        assert response.status_code == 401
