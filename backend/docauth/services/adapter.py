"""
MongoDB authentication adapter.

Bundles the user, account, session and verification services behind one
object built from a database handle and explicit settings.
"""
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from docauth.config import Settings, get_settings
from docauth.database.connections import get_database
from docauth.services.account_service import AccountService
from docauth.services.session_service import SessionService
from docauth.services.user_service import UserService
from docauth.services.verification_service import VerificationService


class MongoAdapter(UserService, AccountService, SessionService, VerificationService):
    """All adapter operations over one auth database."""


async def get_adapter(
    db: Optional[AsyncIOMotorDatabase] = None,
    settings: Optional[Settings] = None,
) -> MongoAdapter:
    """Build an adapter, connecting with the given settings if no db is passed."""
    settings = settings or get_settings()
    if db is None:
        db = await get_database(settings=settings)
    return MongoAdapter(db, settings)
