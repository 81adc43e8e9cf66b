"""
Token utilities for sessions and email verification.
"""
import hashlib
import secrets

# 32 random bytes, hex encoded to 64 characters
TOKEN_BYTES = 32


def generate_token() -> str:
    """
    Generate an opaque, cryptographically strong token.

    Returns:
        64 character hex string (256 bits of entropy)
    """
    return secrets.token_hex(TOKEN_BYTES)


def hash_token(token: str, secret: str) -> str:
    """
    One-way hash of a verification token.

    The secret is shared by every token rather than salted per record, so
    tokens issued under an older scheme keep matching.

    Args:
        token: Raw token sent to the user
        secret: Adapter-level secret

    Returns:
        SHA-256 hex digest of token followed by secret
    """
    return hashlib.sha256(f"{token}{secret}".encode("utf-8")).hexdigest()
