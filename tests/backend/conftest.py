"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for testing the
store adapter, lookup templates and lifecycle services directly.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def store(mock_auth_db):
    """DocumentStore over the mock auth database."""
    from docauth.database.store import DocumentStore

    return DocumentStore(mock_auth_db)


# =============================================================================
# Expiry Helpers
# =============================================================================

@pytest.fixture
def set_expires(mock_auth_db):
    """
    Overwrite the stored expiry of a record.

    Usage:
        await set_expires("sessions", session.id, timedelta(seconds=-1))
    """
    from bson import ObjectId

    from docauth.core.clock import to_store_time

    async def _set(collection: str, record_id: str, offset: timedelta):
        expires = to_store_time(datetime.now(timezone.utc) + offset)
        await mock_auth_db[collection].update_one(
            {"_id": ObjectId(record_id)},
            {"$set": {"expires": expires}},
        )
        return expires

    return _set
