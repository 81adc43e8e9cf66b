"""
User model for the auth database.
"""
from typing import Optional

from pydantic import BaseModel, Field

from docauth.models.fields import StoreTime


class UserProfile(BaseModel):
    """Profile fields supplied when creating or updating a user."""
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Unique email address")
    image: Optional[str] = Field(None, description="Avatar URL")
    email_verified: Optional[StoreTime] = Field(
        None,
        description="When the email address was verified"
    )


class User(UserProfile):
    """
    User document model for MongoDB auth_db.users collection.
    """
    id: str = Field(..., description="MongoDB ObjectId as string")
