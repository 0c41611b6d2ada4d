"""
Global test fixtures for the User Registration API.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Mock Redis (fakeredis)
- Registration/login payload factories
- FastAPI TestClient wired to the mocks
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# Settings are read from the environment on first use
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("ENVIRONMENT", "test")

TEST_DB_NAME = "user_apis_test"


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes, including unique indexes.
    """
    from mongomock_motor import AsyncMongoMockClient

    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_db(mock_async_mongo_client):
    """Provide the mock accounts database with the application's indexes."""
    from user_api.database.collections import create_indexes

    db = mock_async_mongo_client[TEST_DB_NAME]
    await create_indexes(db)
    yield db


# =============================================================================
# Redis Fixtures (fakeredis)
# =============================================================================

@pytest.fixture
def mock_async_redis():
    """Create an async mock Redis client using fakeredis."""
    import fakeredis.aioredis

    return fakeredis.aioredis.FakeRedis(decode_responses=True)


# =============================================================================
# Account Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Valid user registration body (wire format)."""
    return {
        "fullName": "John Doe",
        "username": "johndoe",
        "email": "john@example.com",
        "password": "Password123",
    }


@pytest.fixture
def test_admin_data() -> dict:
    """Valid admin signup body."""
    return {
        "email": "admin@example.com",
        "password": "Admin123",
    }


@pytest.fixture
def make_user_data():
    """Factory for distinct valid user registration bodies."""
    def _make(index: int, **overrides) -> dict:
        data = {
            "fullName": f"Test User {chr(ord('A') + index)}",
            "username": f"test_user_{index}",
            "email": f"user{index}@example.com",
            "password": "Password123",
        }
        data.update(overrides)
        return data
    return _make


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    The FastAPI app.

    Note: This imports the actual app; use ``client`` to get one whose
    lifespan opens mocked database handles.
    """
    from user_api.main import app
    return app


@pytest.fixture
def client(app, mock_async_mongo_client, mock_async_redis) -> Generator:
    """
    Create a TestClient whose lifespan connects to the mocks.

    Indexes are created by the lifespan exactly as in production.
    """
    from user_api.database.connections import MongoConnection

    mongo = MongoConnection(mock_async_mongo_client, TEST_DB_NAME)

    with patch("user_api.main.connect_mongo", return_value=mongo), \
         patch("user_api.main.connect_redis", return_value=mock_async_redis):
        with TestClient(app) as c:
            yield c

    app.dependency_overrides.clear()


@pytest.fixture
def auth_header():
    """Build the Authorization header for a bearer token."""
    def _header(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}
    return _header


# =============================================================================
# Utility Fixtures
# =============================================================================

@pytest.fixture
def assert_datetime_recent():
    """
    Fixture providing a helper to assert a datetime is recent.

    Usage:
        def test_something(assert_datetime_recent):
            assert_datetime_recent(response["createdAt"], max_age_seconds=60)
    """
    def _assert_recent(datetime_str: str, max_age_seconds: int = 60):
        if datetime_str.endswith("Z"):
            datetime_str = datetime_str.replace("Z", "+00:00")

        dt = datetime.fromisoformat(datetime_str)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        now = datetime.now(timezone.utc)
        age = (now - dt).total_seconds()

        assert age < max_age_seconds, f"Datetime {datetime_str} is {age}s old, expected < {max_age_seconds}s"
        assert age >= -1, f"Datetime {datetime_str} is in the future"

    return _assert_recent
