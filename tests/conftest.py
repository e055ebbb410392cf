"""
Pytest configuration and fixtures for the Habity API tests.
"""

import pytest
from typing import Callable, Dict, Generator
from fastapi import FastAPI
from fastapi.testclient import TestClient

from habity_api.config import AppSettings
from habity_api.main import create_app
from habity_api.services import JWTService


TEST_JWT_SECRET = "test-secret-with-more-than-thirty-two-characters"
TEST_USER_ID = "0b9c3a7e-5f1d-4c8e-9a2b-6d4f8e1c2a3b"

SETTINGS_ENV_VARS = [
    "PORT",
    "DATABASE_URL",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_KEY",
    "JWT_SECRET",
    "JWT_AUDIENCE",
    "ENVIRONMENT",
    "LOG_LEVEL",
    "HOST",
    "CORS_ORIGINS",
]


@pytest.fixture
def clean_env(monkeypatch) -> None:
    """Remove every settings variable from the process environment."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_settings() -> AppSettings:
    """Settings used by the application under test."""
    return AppSettings(
        _env_file=None,
        JWT_SECRET=TEST_JWT_SECRET,
        JWT_AUDIENCE="authenticated",
        ENVIRONMENT="testing",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(test_settings: AppSettings) -> FastAPI:
    """Application built from the test settings."""
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Test client for the application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def jwt_service() -> JWTService:
    """JWT service sharing the application's secret."""
    return JWTService(TEST_JWT_SECRET)


@pytest.fixture
def make_auth_headers(jwt_service: JWTService) -> Callable[..., Dict[str, str]]:
    """Build Authorization headers for an arbitrary user id."""

    def _make(user_id: str = TEST_USER_ID, **kwargs) -> Dict[str, str]:
        token = jwt_service.create_access_token(user_id, **kwargs)
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def auth_headers(make_auth_headers) -> Dict[str, str]:
    """Authorization headers for the default test user."""
    return make_auth_headers()


@pytest.fixture
def sample_import_request() -> Dict[str, object]:
    """Valid Habitify import request body."""
    return {
        "api_key": "habitify-test-key",
        "import_habits": True,
        "import_logs": True,
        "import_areas": False,
        "log_date_from": "2024-01-01",
        "log_date_to": "2024-12-31",
    }
