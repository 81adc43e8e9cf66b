"""
Tests for the session lifecycle.

These tests cover:
- Token generation at creation
- Lazy expiry on read
- Rolling renewal and the update window
- Idempotent deletion
"""

import pytest
import pytest_asyncio
from bson import ObjectId
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, patch
from pymongo.errors import PyMongoError

THIRTY_DAYS = timedelta(days=30)


@pytest_asyncio.fixture
async def user(adapter, test_profile):
    return await adapter.create_user(test_profile)


class TestCreateSession:
    """Tests for SessionService.create_session."""

    @pytest.mark.asyncio
    async def test_create_session(self, adapter, user, assert_datetime_near):
        session = await adapter.create_session(user.id)

        assert ObjectId.is_valid(session.id)
        assert session.user_id == user.id
        assert len(session.session_token) == 64
        assert len(session.access_token) == 64
        assert session.session_token != session.access_token
        assert_datetime_near(session.expires, datetime.now(timezone.utc) + THIRTY_DAYS)

    @pytest.mark.asyncio
    async def test_tokens_distinct_across_sessions(self, adapter, user):
        sessions = [await adapter.create_session(user.id) for _ in range(5)]

        tokens = {s.session_token for s in sessions} | {s.access_token for s in sessions}

        assert len(tokens) == 10

    @pytest.mark.asyncio
    async def test_max_age_comes_from_settings(self, mock_auth_db, user, assert_datetime_near):
        from docauth.config import Settings
        from docauth.services.session_service import SessionService

        service = SessionService(mock_auth_db, Settings(session_max_age=3600))

        session = await service.create_session(user.id)

        assert service.session_max_age_ms == 3_600_000
        assert_datetime_near(
            session.expires, datetime.now(timezone.utc) + timedelta(hours=1)
        )


class TestGetSession:
    """Tests for SessionService.get_session."""

    @pytest.mark.asyncio
    async def test_get_session_returns_created(self, adapter, user):
        created = await adapter.create_session(user.id)

        assert await adapter.get_session(created.session_token) == created

    @pytest.mark.asyncio
    async def test_get_session_unknown_token(self, adapter):
        assert await adapter.get_session("0" * 64) is None

    @pytest.mark.asyncio
    async def test_expired_session_is_purged(self, adapter, user, set_expires, mock_auth_db):
        """An expired session should read as missing and be deleted."""
        created = await adapter.create_session(user.id)
        await set_expires("sessions", created.id, timedelta(seconds=-1))

        assert await adapter.get_session(created.session_token) is None
        assert await mock_auth_db.sessions.find_one({"_id": ObjectId(created.id)}) is None
        assert await adapter.get_session(created.session_token) is None

    @pytest.mark.asyncio
    async def test_failed_purge_still_not_found(self, adapter, user, set_expires, mock_auth_db):
        """A failing delete should not fail the read; the record stays."""
        created = await adapter.create_session(user.id)
        await set_expires("sessions", created.id, timedelta(seconds=-1))

        with patch(
            "docauth.services.expiry.do_on_ref",
            AsyncMock(side_effect=PyMongoError("connection lost")),
        ):
            assert await adapter.get_session(created.session_token) is None

        assert await mock_auth_db.sessions.find_one({"_id": ObjectId(created.id)}) is not None

        # Next read retries the delete
        assert await adapter.get_session(created.session_token) is None
        assert await mock_auth_db.sessions.find_one({"_id": ObjectId(created.id)}) is None

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, adapter):
        with patch.object(
            adapter.store, "apply", AsyncMock(side_effect=PyMongoError("down"))
        ):
            with pytest.raises(PyMongoError):
                await adapter.get_session("0" * 64)


class TestUpdateSession:
    """Tests for SessionService.update_session."""

    @pytest.mark.asyncio
    async def test_fresh_session_not_updated(self, adapter, user):
        """Inside the update window, update is a no-op."""
        created = await adapter.create_session(user.id)

        assert await adapter.update_session(created) is None
        assert await adapter.get_session(created.session_token) == created

    @pytest.mark.asyncio
    async def test_aged_session_updated(self, adapter, user, set_expires, assert_datetime_near):
        """Past the update window, expires moves to now + max age."""
        created = await adapter.create_session(user.id)
        aged_expires = await set_expires("sessions", created.id, THIRTY_DAYS - timedelta(days=2))
        aged = created.model_copy(
            update={"expires": aged_expires.replace(tzinfo=timezone.utc)}
        )

        updated = await adapter.update_session(aged)

        assert updated.id == created.id
        assert updated.session_token == created.session_token
        assert updated.access_token == created.access_token
        assert_datetime_near(updated.expires, datetime.now(timezone.utc) + THIRTY_DAYS)
        assert updated.expires > aged.expires

    @pytest.mark.asyncio
    async def test_forced_update(self, adapter, user, set_expires, assert_datetime_near):
        """force=True renews even a fresh session."""
        created = await adapter.create_session(user.id)

        updated = await adapter.update_session(created, force=True)

        assert updated.expires >= created.expires
        assert_datetime_near(updated.expires, datetime.now(timezone.utc) + THIRTY_DAYS)
        assert await adapter.get_session(created.session_token) == updated

    @pytest.mark.asyncio
    async def test_forced_update_of_long_expired_session(
        self, adapter, user, assert_datetime_near
    ):
        created = await adapter.create_session(user.id)
        stale = created.model_copy(
            update={"expires": datetime(2000, 1, 1, tzinfo=timezone.utc)}
        )

        updated = await adapter.update_session(stale, force=True)

        assert_datetime_near(updated.expires, datetime.now(timezone.utc) + THIRTY_DAYS)

    @pytest.mark.asyncio
    async def test_update_deleted_session_returns_none(self, adapter, user):
        created = await adapter.create_session(user.id)
        await adapter.delete_session(created.session_token)

        assert await adapter.update_session(created, force=True) is None

    def test_should_update_window(self, adapter):
        """Renewal is due once now passes expires - max_age + update_age."""
        from docauth.core.clock import epoch_ms
        from docauth.models import Session

        now = datetime(2024, 10, 15, 12, 0, tzinfo=timezone.utc)
        session = Session(
            id=str(ObjectId()),
            user_id=str(ObjectId()),
            session_token="a" * 64,
            access_token="b" * 64,
            expires=now + THIRTY_DAYS,
        )

        assert not adapter.should_update(session, epoch_ms(now))
        assert not adapter.should_update(session, epoch_ms(now + timedelta(days=1)))
        assert adapter.should_update(
            session, epoch_ms(now + timedelta(days=1, milliseconds=1))
        )


class TestDeleteSession:
    """Tests for SessionService.delete_session."""

    @pytest.mark.asyncio
    async def test_delete_session_is_idempotent(self, adapter, user):
        created = await adapter.create_session(user.id)

        deleted = await adapter.delete_session(created.session_token)

        assert deleted == created
        assert await adapter.get_session(created.session_token) is None
        assert await adapter.delete_session(created.session_token) is None
