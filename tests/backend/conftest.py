"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for exercising the
FastAPI routes end to end against the mocked databases.
"""

import sys
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Registered Account Fixtures
# =============================================================================

@pytest.fixture
def registered_user(client, test_user_data) -> dict:
    """
    Register ``test_user_data`` through the API.

    Returns the ``data`` part of the response: ``{"user": ..., "token": ...}``.
    """
    response = client.post("/api/users/register", json=test_user_data)
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.fixture
def registered_admin(client, test_admin_data) -> dict:
    """Sign up ``test_admin_data`` and return ``{"admin": ..., "token": ...}``."""
    response = client.post("/admin/signup", json=test_admin_data)
    assert response.status_code == 201, response.text
    return response.json()["data"]


# =============================================================================
# Token Helpers
# =============================================================================

@pytest.fixture
def decode():
    """Decode a token with the application's secret and algorithm."""
    from user_api.core.security import decode_token
    return decode_token


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert the error envelope."""
    def _assert(response, status_code: int, message_contains: str = None):
        assert response.status_code == status_code, response.text
        data = response.json()
        assert data["success"] is False
        assert "message" in data
        if message_contains:
            assert message_contains.lower() in data["message"].lower()
        return data
    return _assert
