"""
Auth database configuration.
Stores users, linked accounts, sessions and verification requests.
"""
from typing import NamedTuple

DB_NAME = "auth_db"


class Collections:
    """Collection names in auth_db."""
    USERS = "users"
    ACCOUNTS = "accounts"
    SESSIONS = "sessions"
    VERIFICATION_REQUESTS = "verification_requests"


class IndexSpec(NamedTuple):
    """A named secondary index: collection, ordered term fields, options."""
    collection: str
    fields: tuple[str, ...]
    unique: bool = True
    sparse: bool = False


class Indexes:
    """Secondary index names in auth_db."""
    USER_BY_EMAIL = "user_by_email"
    ACCOUNT_BY_PROVIDER_ACCOUNT_ID = "account_by_provider_account_id"
    SESSION_BY_TOKEN = "session_by_token"
    VERIFICATION_REQUEST_BY_TOKEN = "verification_request_by_token"


INDEXES: dict[str, IndexSpec] = {
    Indexes.USER_BY_EMAIL: IndexSpec(
        Collections.USERS, ("email",), sparse=True
    ),
    Indexes.ACCOUNT_BY_PROVIDER_ACCOUNT_ID: IndexSpec(
        Collections.ACCOUNTS, ("provider_id", "provider_account_id")
    ),
    Indexes.SESSION_BY_TOKEN: IndexSpec(
        Collections.SESSIONS, ("session_token",)
    ),
    Indexes.VERIFICATION_REQUEST_BY_TOKEN: IndexSpec(
        Collections.VERIFICATION_REQUESTS, ("identifier", "token")
    ),
}
