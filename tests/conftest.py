"""
Shared pytest fixtures for fieldvue tests.
"""
import os
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest

from fieldvue.application.dto.user_dto import UserResponse
from fieldvue.domain.constants.enums import UserRole


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_fieldvue_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "DETECTION_BACKEND": "http",
        "DETECTION_ENDPOINT": "http://detector.test",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches the modules that import it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440

    with patch("fieldvue.core.config.get_settings", return_value=mock), patch(
        "fieldvue.core.security.get_settings", return_value=mock
    ):
        yield mock


def make_user(role: UserRole = UserRole.CONTRACTOR, user_id: str = "usr-1") -> UserResponse:
    return UserResponse(
        id=user_id,
        name=f"{role.value.title()} User",
        email=f"{user_id}@example.com",
        role=role,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def contractor():
    return make_user(UserRole.CONTRACTOR, "contractor-1")


@pytest.fixture
def customer():
    return make_user(UserRole.CUSTOMER, "customer-1")


@pytest.fixture
def admin():
    return make_user(UserRole.ADMIN, "admin-1")


@pytest.fixture
def user_factory():
    return make_user
