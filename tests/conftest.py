"""
Global test fixtures for docauth.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor) with the real indexes
- Adapter settings and adapter instances
- Profile and email provider factories
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_auth_db(mock_async_mongo_client):
    """Provide mock auth_db database with its indexes."""
    from docauth.database.registry import create_indexes

    db = mock_async_mongo_client["auth_db"]
    await create_indexes(db)
    yield db


# =============================================================================
# Adapter Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Adapter settings with the default session ages and a known secret."""
    from docauth.config import Settings

    return Settings(
        mongo_uri="mongodb://test:27017",
        auth_db_name="auth_db",
        secret="test-secret",
        base_url="http://localhost:3000",
    )


@pytest_asyncio.fixture
async def adapter(mock_auth_db, test_settings):
    """MongoAdapter over the mock auth database."""
    from docauth.services.adapter import MongoAdapter

    return MongoAdapter(mock_auth_db, test_settings)


# =============================================================================
# Data Fixtures
# =============================================================================

@pytest.fixture
def test_profile():
    """A complete user profile."""
    from docauth.models import UserProfile

    return UserProfile(
        name="Test User",
        email="testuser@example.com",
        image="https://example.com/avatar.png",
        email_verified=datetime(2024, 10, 15, 12, 0, 0, 123000, tzinfo=timezone.utc),
    )


@pytest.fixture
def send_verification_request():
    """Mock delivery capability."""
    return AsyncMock(return_value=None)


@pytest.fixture
def email_provider(send_verification_request):
    """Email provider with a one day token lifetime and mocked delivery."""
    from docauth.models import EmailProvider

    return EmailProvider(
        id="email",
        max_age=24 * 60 * 60,
        send_verification_request=send_verification_request,
    )


# =============================================================================
# Utility Fixtures
# =============================================================================

@pytest.fixture
def assert_datetime_near():
    """
    Fixture providing a helper to assert a datetime is close to another.

    Usage:
        def test_something(assert_datetime_near):
            assert_datetime_near(session.expires, expected, tolerance_seconds=1)
    """
    def _assert_near(actual: datetime, expected: datetime, tolerance_seconds: float = 1.0):
        delta = abs((actual - expected).total_seconds())
        assert delta < tolerance_seconds, (
            f"{actual.isoformat()} is {delta}s from {expected.isoformat()}, "
            f"expected < {tolerance_seconds}s"
        )

    return _assert_near
