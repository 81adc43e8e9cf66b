"""
Session lifecycle: create, read with lazy expiry, rolling renewal, delete.
"""
import logging
from typing import Optional

from docauth.core.clock import epoch_ms, from_epoch_ms, to_store_time, utc_now
from docauth.core.security import generate_token
from docauth.database.databases.auth_db import Collections, Indexes
from docauth.database.queries import do_on_index, do_on_ref
from docauth.database.store import Op
from docauth.models import Session
from docauth.services.base import BaseService
from docauth.services.expiry import is_expired, purge_lazily
from docauth.services.reshape import reshape_session, session_document

logger = logging.getLogger(__name__)


class SessionService(BaseService):
    """Service for session operations."""

    @property
    def session_max_age_ms(self) -> int:
        return self.settings.session_max_age * 1000

    @property
    def session_update_age_ms(self) -> int:
        return self.settings.session_update_age * 1000

    async def create_session(self, user_id: str) -> Optional[Session]:
        """
        Start a session for a user.

        Both tokens are independent 32-byte random values. Collisions are
        not retried; the unique session_token index rejects them.
        """
        expires = from_epoch_ms(epoch_ms(utc_now()) + self.session_max_age_ms)
        result = await self.store.create(
            Collections.SESSIONS,
            session_document(
                user_id=user_id,
                session_token=generate_token(),
                access_token=generate_token(),
                expires=expires,
            ),
        )
        logger.debug(f"Created session {result.ref} for user {user_id}")
        return reshape_session(result)

    async def get_session(self, session_token: str) -> Optional[Session]:
        """
        Get a live session by token.

        An expired session is deleted and reported as not found.
        """
        result = await do_on_index(self.store, Indexes.SESSION_BY_TOKEN, [session_token])
        session = reshape_session(result)
        if session is None:
            return None

        if is_expired(session.expires):
            await purge_lazily(self.store, Collections.SESSIONS, result.ref)
            return None

        return session

    def should_update(self, session: Session, now_ms: int) -> bool:
        """True once the session has aged past the update window."""
        return (
            epoch_ms(session.expires) - self.session_max_age_ms + self.session_update_age_ms
            < now_ms
        )

    async def update_session(
        self, session: Session, force: bool = False
    ) -> Optional[Session]:
        """
        Extend a session to now + session_max_age.

        Skipped (returns None) while the session is inside its update
        window unless force is set. Tokens are never rotated.
        """
        now_ms = epoch_ms(utc_now())
        if not force and not self.should_update(session, now_ms):
            return None

        result = await do_on_ref(
            self.store,
            Collections.SESSIONS,
            session.id,
            Op.UPDATE,
            {"expires": to_store_time(from_epoch_ms(now_ms + self.session_max_age_ms))},
        )
        return reshape_session(result)

    async def delete_session(self, session_token: str) -> Optional[Session]:
        """Delete a session by token; None if already gone."""
        result = await do_on_index(
            self.store, Indexes.SESSION_BY_TOKEN, [session_token], Op.DELETE
        )
        return reshape_session(result)
