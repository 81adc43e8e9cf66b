"""
Verification request model and email provider capability.
"""
from typing import Awaitable, Callable

from pydantic import BaseModel, Field

from docauth.config import get_settings
from docauth.models.fields import StoreTime


class VerificationRequest(BaseModel):
    """
    Verification request document for auth_db.verification_requests.

    ``token`` holds the one-way hash; the raw token is never stored.
    """
    id: str = Field(..., description="MongoDB ObjectId as string")
    identifier: str = Field(..., description="Who the token was issued to (e.g., email)")
    token: str = Field(..., description="SHA-256 hash of token + secret")
    expires: StoreTime = Field(..., description="Token expiry timestamp")


class EmailProvider(BaseModel):
    """
    Verification provider: token lifetime plus the delivery capability.

    ``max_age`` defaults to ``Settings.verification_max_age``.
    ``send_verification_request`` is awaited with keyword arguments
    ``identifier``, ``url``, ``token``, ``base_url`` and ``provider``.
    """
    id: str = Field(default="email", description="Provider identifier")
    max_age: int = Field(
        default_factory=lambda: get_settings().verification_max_age,
        gt=0,
        description="Token lifetime in seconds"
    )
    send_verification_request: Callable[..., Awaitable[None]] = Field(
        ...,
        description="Delivers the raw token to the identifier"
    )
