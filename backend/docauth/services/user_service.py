"""
User service: identity records and lookup by email or linked account.
"""
import logging
from typing import Optional

from docauth.database.databases.auth_db import Collections, Indexes
from docauth.database.queries import do_on_index, do_on_ref, follow_index
from docauth.database.store import Op
from docauth.models import User, UserProfile
from docauth.services.base import BaseService
from docauth.services.reshape import reshape_user, user_document

logger = logging.getLogger(__name__)


class UserService(BaseService):
    """Service for user operations."""

    async def create_user(self, profile: UserProfile) -> Optional[User]:
        """
        Create a user from a profile.

        Raises:
            DuplicateKeyError: If the email is already registered
        """
        result = await self.store.create(
            Collections.USERS,
            user_document(
                name=profile.name,
                email=profile.email,
                image=profile.image,
                email_verified=profile.email_verified,
            ),
        )
        logger.debug(f"Created user {result.ref}")
        return reshape_user(result)

    async def get_user(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        result = await do_on_ref(self.store, Collections.USERS, user_id)
        return reshape_user(result)

    async def get_user_by_email(self, email: Optional[str]) -> Optional[User]:
        """Get user by email; None for an empty email."""
        if not email:
            return None
        result = await do_on_index(self.store, Indexes.USER_BY_EMAIL, [email])
        return reshape_user(result)

    async def get_user_by_provider_account_id(
        self, provider_id: str, provider_account_id: str
    ) -> Optional[User]:
        """Get the user owning a linked provider account."""
        result = await follow_index(
            self.store,
            Indexes.ACCOUNT_BY_PROVIDER_ACCOUNT_ID,
            [provider_id, provider_account_id],
            "user_id",
            Collections.USERS,
        )
        return reshape_user(result)

    async def update_user(self, user: User) -> Optional[User]:
        """
        Write the user's profile fields.

        Fields set to None are removed from the stored document.
        """
        result = await do_on_ref(
            self.store,
            Collections.USERS,
            user.id,
            Op.UPDATE,
            user_document(
                name=user.name,
                email=user.email,
                image=user.image,
                email_verified=user.email_verified,
            ),
        )
        return reshape_user(result)

    async def delete_user(self, user_id: str) -> Optional[User]:
        """Delete a user. Accounts and sessions are left to the caller."""
        result = await do_on_ref(self.store, Collections.USERS, user_id, Op.DELETE)
        return reshape_user(result)
