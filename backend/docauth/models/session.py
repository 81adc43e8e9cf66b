"""
Session model for the auth database.
"""
from pydantic import BaseModel, Field

from docauth.models.fields import StoreTime


class Session(BaseModel):
    """
    Session document model for MongoDB auth_db.sessions collection.

    Tokens are generated once at creation; renewal only moves ``expires``.
    """
    id: str = Field(..., description="MongoDB ObjectId as string")
    user_id: str = Field(..., description="Owner user ID")
    session_token: str = Field(..., description="Opaque session token (64 hex chars)")
    access_token: str = Field(..., description="Opaque access token (64 hex chars)")
    expires: StoreTime = Field(..., description="Session expiry timestamp")
