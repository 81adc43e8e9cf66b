"""
Linked provider account model.
"""
from typing import Optional

from pydantic import BaseModel, Field

from docauth.models.fields import StoreTime


class Account(BaseModel):
    """
    Account document model for MongoDB auth_db.accounts collection.

    (provider_id, provider_account_id) is unique; each account belongs
    to exactly one user.
    """
    id: str = Field(..., description="MongoDB ObjectId as string")
    user_id: str = Field(..., description="Owner user ID")
    provider_id: str = Field(..., description="Provider name (e.g., 'github')")
    provider_type: str = Field(..., description="Provider kind (e.g., 'oauth')")
    provider_account_id: str = Field(..., description="Account ID at the provider")
    refresh_token: Optional[str] = Field(None, description="Provider refresh token")
    access_token: Optional[str] = Field(None, description="Provider access token")
    access_token_expires: Optional[StoreTime] = Field(
        None,
        description="Provider access token expiry"
    )
