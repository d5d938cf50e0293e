"""
auth/passwords.py -- One-way password hashing.

bcrypt is used directly rather than through passlib: passlib's wrap-bug
detection creates a password longer than 72 bytes, which bcrypt 4.x rejects
with an explicit error. hash_password() enforces the 72-byte limit itself.

verify_password() is the hash-verification primitive the credential model
consumes. It never raises: a malformed hash is simply "does not match".
"""

from __future__ import annotations

import bcrypt

MAX_PASSWORD_BYTES = 72


def hash_password(plain: str) -> str:
    """Return a bcrypt hash of the given plaintext password.

    bcrypt only reads the first 72 bytes of its input, and bcrypt 5.x refuses
    longer input outright. Rather than silently truncate, passwords over
    MAX_PASSWORD_BYTES (UTF-8 encoded) are rejected with ValueError.
    """
    encoded = plain.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValueError(
            f"Password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded (got {len(encoded)})."
        )
    return bcrypt.hashpw(encoded, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Return True if the plaintext password matches the bcrypt hash."""
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except Exception:
        return False
