"""
Services - user, account, session and verification request operations.
"""
from docauth.services.account_service import AccountService
from docauth.services.adapter import MongoAdapter, get_adapter
from docauth.services.session_service import SessionService
from docauth.services.user_service import UserService
from docauth.services.verification_service import VerificationService

__all__ = [
    "MongoAdapter",
    "get_adapter",
    "UserService",
    "AccountService",
    "SessionService",
    "VerificationService",
]
