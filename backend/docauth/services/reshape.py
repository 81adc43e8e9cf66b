"""
Entity reshaping between store records and public models.

Reshaping swaps the store reference in as the public ``id``, turns stored
datetimes back into aware UTC timestamps and validates the payload against
the entity model. A NOT_FOUND record reshapes to None.
"""
from datetime import datetime
from typing import Any, Optional

from docauth.core.clock import from_store_time, to_store_time
from docauth.database.queries import to_ref
from docauth.database.store import StoreRecord
from docauth.models import Account, Session, User, VerificationRequest


def _user_ref(user_id: str) -> Any:
    # Stored as ObjectId so the account -> user join can match _id
    return to_ref(user_id) or user_id


# ==================== Documents ====================

def user_document(
    name: Optional[str] = None,
    email: Optional[str] = None,
    image: Optional[str] = None,
    email_verified: Optional[datetime] = None,
) -> dict[str, Any]:
    return {
        "name": name,
        "email": email,
        "image": image,
        "email_verified": to_store_time(email_verified),
    }


def account_document(
    user_id: str,
    provider_id: str,
    provider_type: str,
    provider_account_id: str,
    refresh_token: Optional[str] = None,
    access_token: Optional[str] = None,
    access_token_expires: Optional[datetime] = None,
) -> dict[str, Any]:
    return {
        "user_id": _user_ref(user_id),
        "provider_id": provider_id,
        "provider_type": provider_type,
        "provider_account_id": provider_account_id,
        "refresh_token": refresh_token,
        "access_token": access_token,
        "access_token_expires": to_store_time(access_token_expires),
    }


def session_document(
    user_id: str,
    session_token: str,
    access_token: str,
    expires: datetime,
) -> dict[str, Any]:
    return {
        "user_id": _user_ref(user_id),
        "session_token": session_token,
        "access_token": access_token,
        "expires": to_store_time(expires),
    }


def verification_request_document(
    identifier: str,
    token: str,
    expires: datetime,
) -> dict[str, Any]:
    return {
        "identifier": identifier,
        "token": token,
        "expires": to_store_time(expires),
    }


# ==================== Entities ====================

def reshape_user(record: StoreRecord) -> Optional[User]:
    """Store record -> User, or None when not found."""
    if not record.found:
        return None
    data = record.data
    return User.model_validate({
        **data,
        "id": str(record.ref),
        "email_verified": from_store_time(data.get("email_verified")),
    })


def reshape_account(record: StoreRecord) -> Optional[Account]:
    """Store record -> Account, or None when not found."""
    if not record.found:
        return None
    data = record.data
    return Account.model_validate({
        **data,
        "id": str(record.ref),
        "user_id": str(data["user_id"]),
        "access_token_expires": from_store_time(data.get("access_token_expires")),
    })


def reshape_session(record: StoreRecord) -> Optional[Session]:
    """Store record -> Session, or None when not found."""
    if not record.found:
        return None
    data = record.data
    return Session.model_validate({
        **data,
        "id": str(record.ref),
        "user_id": str(data["user_id"]),
        "expires": from_store_time(data["expires"]),
    })


def reshape_verification_request(record: StoreRecord) -> Optional[VerificationRequest]:
    """Store record -> VerificationRequest, or None when not found."""
    if not record.found:
        return None
    data = record.data
    return VerificationRequest.model_validate({
        **data,
        "id": str(record.ref),
        "expires": from_store_time(data["expires"]),
    })
