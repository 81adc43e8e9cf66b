"""
Pydantic models for the four auth record kinds.
"""
from docauth.models.user import User, UserProfile
from docauth.models.account import Account
from docauth.models.session import Session
from docauth.models.verification import EmailProvider, VerificationRequest

__all__ = [
    "User",
    "UserProfile",
    "Account",
    "Session",
    "VerificationRequest",
    "EmailProvider",
]
