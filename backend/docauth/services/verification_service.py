"""
Verification tokens: one-time, hashed, lazily expired.
"""
import logging
from typing import Any, Awaitable, Callable, Optional

from docauth.core.clock import epoch_ms, from_epoch_ms, utc_now
from docauth.core.security import hash_token
from docauth.database.databases.auth_db import Collections, Indexes
from docauth.database.queries import do_on_index
from docauth.database.store import Op
from docauth.models import EmailProvider, VerificationRequest
from docauth.services.base import BaseService
from docauth.services.expiry import is_expired, purge_lazily
from docauth.services.reshape import (
    reshape_verification_request,
    verification_request_document,
)

logger = logging.getLogger(__name__)


class VerificationService(BaseService):
    """Service for verification request operations."""

    def _hash(self, token: str, secret: Optional[str]) -> str:
        return hash_token(token, secret or self.settings.secret)

    def email_provider(
        self,
        send_verification_request: Callable[..., Awaitable[None]],
        **kwargs: Any,
    ) -> EmailProvider:
        """Email provider whose token lifetime defaults to this adapter's settings."""
        kwargs.setdefault("max_age", self.settings.verification_max_age)
        return EmailProvider(send_verification_request=send_verification_request, **kwargs)

    async def create_verification_request(
        self,
        identifier: str,
        url: str,
        token: str,
        secret: Optional[str],
        provider: EmailProvider,
    ) -> Optional[VerificationRequest]:
        """
        Store a hashed verification token, then deliver the raw one.

        The record is persisted before delivery. If delivery fails the
        error propagates and the stored token stays valid.

        Args:
            identifier: Recipient (e.g., email address)
            url: Link the recipient follows to verify
            token: Raw token; only its hash is stored
            secret: Hash secret, defaults to the configured secret
            provider: Supplies max_age and the send capability

        Returns:
            The stored request (token field holds the hash)
        """
        expires = from_epoch_ms(epoch_ms(utc_now()) + provider.max_age * 1000)
        result = await self.store.create(
            Collections.VERIFICATION_REQUESTS,
            verification_request_document(
                identifier=identifier,
                token=self._hash(token, secret),
                expires=expires,
            ),
        )
        logger.debug(f"Created verification request {result.ref}")

        try:
            await provider.send_verification_request(
                identifier=identifier,
                url=url,
                token=token,
                base_url=self.settings.base_url,
                provider=provider,
            )
        except Exception as e:
            logger.error(f"Error sending verification request {result.ref}: {e}")
            raise

        return reshape_verification_request(result)

    async def get_verification_request(
        self, identifier: str, token: str, secret: Optional[str] = None
    ) -> Optional[VerificationRequest]:
        """
        Get an unexpired verification request matching identifier and token.

        An expired request is deleted and reported as not found.
        """
        result = await do_on_index(
            self.store,
            Indexes.VERIFICATION_REQUEST_BY_TOKEN,
            [identifier, self._hash(token, secret)],
        )
        request = reshape_verification_request(result)
        if request is None:
            return None

        if is_expired(request.expires):
            await purge_lazily(self.store, Collections.VERIFICATION_REQUESTS, result.ref)
            return None

        return request

    async def delete_verification_request(
        self, identifier: str, token: str, secret: Optional[str] = None
    ) -> Optional[VerificationRequest]:
        """Delete a verification request; None if already gone."""
        result = await do_on_index(
            self.store,
            Indexes.VERIFICATION_REQUEST_BY_TOKEN,
            [identifier, self._hash(token, secret)],
            Op.DELETE,
        )
        return reshape_verification_request(result)
