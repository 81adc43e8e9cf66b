"""
Integration test fixtures.

These tests drive complete authentication flows through the public
adapter surface against the in-memory MongoDB.
Mark with @pytest.mark.integration to select or skip them.
"""
import pytest


@pytest.fixture
def flow_email():
    """Email used for the end-to-end sign-in flow."""
    return "a@b.com"


@pytest.fixture
def tolerance_seconds():
    """Allowed drift between computed and observed expiry times."""
    return 1.0
