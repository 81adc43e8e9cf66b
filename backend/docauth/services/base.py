"""
Shared construction for the adapter services.
"""
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from docauth.config import Settings, get_settings
from docauth.database.store import DocumentStore


class BaseService:
    """Holds the store and settings; no other state between calls."""

    def __init__(self, db: AsyncIOMotorDatabase, settings: Optional[Settings] = None):
        """Initialize with auth database and adapter settings."""
        self.db = db
        self.store = DocumentStore(db)
        self.settings = settings or get_settings()
