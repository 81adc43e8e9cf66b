"""
Account service: provider identities linked to users.
"""
from datetime import datetime
from typing import Optional

from docauth.database.databases.auth_db import Collections, Indexes
from docauth.database.queries import do_on_index
from docauth.database.store import Op
from docauth.models import Account
from docauth.services.base import BaseService
from docauth.services.reshape import account_document, reshape_account


class AccountService(BaseService):
    """Service for linked account operations."""

    async def link_account(
        self,
        user_id: str,
        provider_id: str,
        provider_type: str,
        provider_account_id: str,
        refresh_token: Optional[str] = None,
        access_token: Optional[str] = None,
        access_token_expires: Optional[datetime] = None,
    ) -> Optional[Account]:
        """
        Link a provider account to a user.

        Raises:
            DuplicateKeyError: If the provider account is already linked
        """
        result = await self.store.create(
            Collections.ACCOUNTS,
            account_document(
                user_id=user_id,
                provider_id=provider_id,
                provider_type=provider_type,
                provider_account_id=provider_account_id,
                refresh_token=refresh_token,
                access_token=access_token,
                access_token_expires=access_token_expires,
            ),
        )
        return reshape_account(result)

    async def unlink_account(
        self, provider_id: str, provider_account_id: str
    ) -> Optional[Account]:
        """Remove a linked account; None if it was not linked."""
        result = await do_on_index(
            self.store,
            Indexes.ACCOUNT_BY_PROVIDER_ACCOUNT_ID,
            [provider_id, provider_account_id],
            Op.DELETE,
        )
        return reshape_account(result)
