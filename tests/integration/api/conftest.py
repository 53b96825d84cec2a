"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from portier.presentation.api.app import API_PREFIX, create_app
from portier.presentation.api.dependencies import reset_database_state
from portier_config import clear_settings_cache


@pytest.fixture
def api_prefix() -> str:
    """Get the API prefix for building URLs."""
    return API_PREFIX


@pytest.fixture
def test_client(monkeypatch, tmp_path):
    """Create a test client backed by a throwaway SQLite file.

    The app's lifespan creates the tables inside the client's event loop.
    """
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path}/test.db")
    monkeypatch.setenv("PASSWORD_HASH_ROUNDS", "4")
    monkeypatch.setenv("API_DEBUG", "true")
    clear_settings_cache()
    reset_database_state()

    with TestClient(create_app()) as client:
        yield client

    reset_database_state()


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {
        "name": "Test User",
        "email": "test@example.com",
        "password": "SecurePassword123!",
    }


@pytest.fixture
def registered_user(test_client, api_prefix, registered_user_data) -> dict:
    """Register the test user and return the response body."""
    response = test_client.post(
        f"{api_prefix}/auth/register",
        json=registered_user_data,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(registered_user) -> dict:
    """Authorization header for the registered test user."""
    return {"Authorization": f"Bearer {registered_user['token']}"}
