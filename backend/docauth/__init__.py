"""
docauth - MongoDB persistence for users, linked accounts, sessions and
email verification tokens.
"""
from docauth.config import Settings, get_settings
from docauth.models import (
    Account,
    EmailProvider,
    Session,
    User,
    UserProfile,
    VerificationRequest,
)
from docauth.services import MongoAdapter, get_adapter

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "MongoAdapter",
    "get_adapter",
    "User",
    "UserProfile",
    "Account",
    "Session",
    "VerificationRequest",
    "EmailProvider",
]
