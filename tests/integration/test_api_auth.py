"""
Integration tests for auth API endpoints.
Uses TestClient with mocked use cases (no real DB).
"""
from unittest.mock import AsyncMock

import pytest

pytestmark = pytest.mark.integration

from fieldvue.application.dto.auth_dto import AuthResponse, MessageResponse
from fieldvue.application.use_cases.auth import (
    EmailAlreadyRegisteredError,
    LoginUserUseCase,
    LogoutUserUseCase,
    RegisterUserUseCase,
)


@pytest.fixture
def register_use_case(registry):
    registry[RegisterUserUseCase] = AsyncMock(spec=RegisterUserUseCase)
    return registry[RegisterUserUseCase]


@pytest.fixture
def login_use_case(registry):
    registry[LoginUserUseCase] = AsyncMock(spec=LoginUserUseCase)
    return registry[LoginUserUseCase]


@pytest.fixture
def logout_use_case(registry):
    registry[LogoutUserUseCase] = AsyncMock(spec=LogoutUserUseCase)
    return registry[LogoutUserUseCase]


REGISTRATION = {
    "name": "Test User",
    "email": "test@example.com",
    "password": "password123",
    "role": "contractor",
}


class TestAuthAPI:
    """Tests for /api/v1/auth endpoints"""

    def test_register_success(self, client, register_use_case, contractor):
        register_use_case.execute.return_value = AuthResponse(
            message="User registered successfully", token="jwt", user=contractor
        )
        response = client.post("/api/v1/auth/register", json=REGISTRATION)
        assert response.status_code == 201
        data = response.json()
        assert data["token"] == "jwt"
        assert data["user"]["role"] == "contractor"

    def test_register_duplicate_returns_409(self, client, register_use_case):
        register_use_case.execute.side_effect = EmailAlreadyRegisteredError("User with this email already exists")
        response = client.post("/api/v1/auth/register", json=REGISTRATION)
        assert response.status_code == 409

    def test_register_missing_fields_rejected(self, client, register_use_case):
        response = client.post("/api/v1/auth/register", json={"email": "test@example.com"})
        assert response.status_code == 422
        register_use_case.execute.assert_not_awaited()

    def test_login_invalid_credentials(self, client, login_use_case):
        login_use_case.execute.return_value = None
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "wrongpass"},
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_login_success(self, client, login_use_case, contractor):
        login_use_case.execute.return_value = AuthResponse(message="Login successful", token="jwt", user=contractor)
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "password123"},
        )
        assert response.status_code == 200
        assert response.json()["token"] == "jwt"

    def test_me_requires_token(self, client):
        assert client.get("/api/v1/auth/me").status_code in (401, 403)

    def test_me(self, client, contractor, auth_headers):
        response = client.get("/api/v1/auth/me", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["id"] == contractor.id

    def test_logout(self, client, logout_use_case, auth_headers):
        logout_use_case.execute.return_value = MessageResponse(message="Logout successful")
        response = client.post("/api/v1/auth/logout", headers=auth_headers)
        assert response.status_code == 200
        logout_use_case.execute.assert_awaited_once_with("test-token")
