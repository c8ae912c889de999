"""
Fixtures for API integration tests: the FastAPI app with a mocked DI container.
"""
from contextlib import ExitStack
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from fieldvue.application.services.analysis_queue import AnalysisQueue
from fieldvue.application.use_cases.auth.get_current_user import GetCurrentUserUseCase

CONTROLLER_MODULES = [
    "fieldvue.api.v1.dependencies",
    "fieldvue.api.v1.auth_controller",
    "fieldvue.api.v1.job_controller",
    "fieldvue.api.v1.room_controller",
    "fieldvue.api.v1.customer_controller",
    "fieldvue.api.v1.upload_controller",
    "fieldvue.api.v1.ai_controller",
    "fieldvue.main",
]

@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer test-token"}


@pytest.fixture
def registry(contractor):
    """Maps container keys to mocks; tests add the use cases they exercise."""
    current_user_use_case = AsyncMock(spec=GetCurrentUserUseCase)
    current_user_use_case.execute.return_value = contractor

    analysis_queue = MagicMock(spec=AnalysisQueue)
    analysis_queue.shutdown = AsyncMock()

    return {
        GetCurrentUserUseCase: current_user_use_case,
        AnalysisQueue: analysis_queue,
    }


@pytest.fixture
def mock_container(registry):
    container = MagicMock()
    container.get.side_effect = lambda key: registry[key]
    return container


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container (runs the app lifespan)."""
    from fieldvue.main import app

    with ExitStack() as stack:
        for module in CONTROLLER_MODULES:
            stack.enter_context(patch(f"{module}.get_container", return_value=mock_container))
        stack.enter_context(patch("fieldvue.main.ensure_indexes", new=AsyncMock()))
        stack.enter_context(patch("fieldvue.main.close_database"))
        with TestClient(app) as test_client:
            yield test_client
