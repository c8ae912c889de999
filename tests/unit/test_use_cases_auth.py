"""
Unit tests for auth use cases (Register, Login, GetCurrentUser, Logout).
"""
import time
from unittest.mock import AsyncMock

import jwt
import pytest

from fieldvue.application.dto.auth_dto import AuthResponse, UserLoginRequest, UserRegistrationRequest
from fieldvue.application.use_cases.auth import (
    EmailAlreadyRegisteredError,
    GetCurrentUserUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RegisterUserUseCase,
)
from fieldvue.core.security import create_access_token, decode_access_token, hash_password
from fieldvue.domain.constants.enums import UserRole
from fieldvue.domain.models.user import User


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock()


def _user(user_id="usr-1", password="validpass123", role=UserRole.CONTRACTOR):
    return User(
        id=user_id,
        name="Test User",
        email="test@example.com",
        hashed_password=hash_password(password),
        role=role,
    )


class TestRegisterUserUseCase:
    @pytest.mark.asyncio
    async def test_register_returns_token_and_user(self, mock_user_repo, mock_settings):
        mock_user_repo.email_exists.return_value = False
        mock_user_repo.create.side_effect = lambda user: User(
            id="usr-new",
            name=user.name,
            email=user.email,
            hashed_password=user.hashed_password,
            role=user.role,
        )

        result = await RegisterUserUseCase(mock_user_repo).execute(
            UserRegistrationRequest(
                name=" New User ",
                email="New@Example.com",
                password="password123",
                role="contractor",
            )
        )

        assert isinstance(result, AuthResponse)
        assert result.user.email == "new@example.com"
        assert result.user.name == "New User"
        claims = decode_access_token(result.token)
        assert claims.user_id == "usr-new"
        assert claims.role == UserRole.CONTRACTOR
        mock_user_repo.email_exists.assert_awaited_once_with("new@example.com")
        saved = mock_user_repo.create.call_args.args[0]
        assert saved.hashed_password != "password123"

    @pytest.mark.asyncio
    async def test_duplicate_email(self, mock_user_repo):
        mock_user_repo.email_exists.return_value = True
        with pytest.raises(EmailAlreadyRegisteredError):
            await RegisterUserUseCase(mock_user_repo).execute(
                UserRegistrationRequest(name="X", email="test@example.com", password="password123")
            )
        mock_user_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_caught_by_unique_index(self, mock_user_repo, mock_settings):
        mock_user_repo.email_exists.return_value = False
        mock_user_repo.create.side_effect = ValueError("Email already registered")
        with pytest.raises(EmailAlreadyRegisteredError):
            await RegisterUserUseCase(mock_user_repo).execute(
                UserRegistrationRequest(name="X", email="x@example.com", password="password123")
            )


class TestLoginUserUseCase:
    @pytest.mark.asyncio
    async def test_login_success(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_email.return_value = _user()
        result = await LoginUserUseCase(mock_user_repo).execute(
            UserLoginRequest(email="test@example.com", password="validpass123")
        )
        assert result is not None
        assert result.user.id == "usr-1"
        assert result.token

    @pytest.mark.asyncio
    async def test_unknown_user(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        result = await LoginUserUseCase(mock_user_repo).execute(
            UserLoginRequest(email="unknown@example.com", password="anypass123")
        )
        assert result is None

    @pytest.mark.asyncio
    async def test_wrong_password(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = _user()
        result = await LoginUserUseCase(mock_user_repo).execute(
            UserLoginRequest(email="test@example.com", password="wrongpass")
        )
        assert result is None


class TestGetCurrentUserUseCase:
    @pytest.mark.asyncio
    async def test_resolves_user(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_id.return_value = _user()
        token = create_access_token(_user())
        user = await GetCurrentUserUseCase(mock_user_repo).execute(token)
        assert user.id == "usr-1"
        mock_user_repo.find_by_id.assert_awaited_once_with("usr-1")

    @pytest.mark.asyncio
    async def test_invalid_token(self, mock_user_repo, mock_settings):
        with pytest.raises(ValueError, match="Invalid or expired token"):
            await GetCurrentUserUseCase(mock_user_repo).execute("garbage")

    @pytest.mark.asyncio
    async def test_missing_subject(self, mock_user_repo, mock_settings):
        now = int(time.time())
        token = jwt.encode(
            {"email": "a@example.com", "role": "customer", "iat": now, "exp": now + 60},
            mock_settings.jwt_secret_key,
            algorithm="HS256",
        )
        with pytest.raises(ValueError, match="Invalid or expired token"):
            await GetCurrentUserUseCase(mock_user_repo).execute(token)

    @pytest.mark.asyncio
    async def test_deleted_user(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_id.return_value = None
        token = create_access_token(_user(user_id="usr-gone"))
        with pytest.raises(ValueError, match="User not found"):
            await GetCurrentUserUseCase(mock_user_repo).execute(token)


class TestLogoutUserUseCase:
    @pytest.mark.asyncio
    async def test_valid_token(self, mock_settings):
        token = create_access_token(_user())
        result = await LogoutUserUseCase().execute(token)
        assert result.message == "Logout successful"

    @pytest.mark.asyncio
    async def test_invalid_token(self, mock_settings):
        with pytest.raises(ValueError):
            await LogoutUserUseCase().execute("garbage")
