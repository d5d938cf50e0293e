"""
auth/models.py -- The user credential record and its helpers.

Pattern: Data class plus module-level functions. The User dataclass owns the
shape; the functions below own the (small) credential logic so it can be
tested without a database or a web framework.

Hashing is always explicit. There is no hash-on-write magic: set_password()
calls the hasher before storing, and is_using_default_credential() calls the
verifier it is given.

Layer rule: no imports from api/. Import from core/ is allowed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from auth.passwords import hash_password, verify_password

logger = logging.getLogger("accountdesk.auth")

# Placeholder credential assigned to accounts provisioned through an external
# identity provider (Google sign-up). Those users are prompted to set a real
# password once is_using_default_credential() reports True.
_DEFAULT_CREDENTIAL = "google123"

_REQUIRED_FIELDS: frozenset[str] = frozenset({"name", "email"})

Verifier = Callable[[str, str], bool]
Hasher = Callable[[str], str]


@dataclass
class User:
    """One account's identity and credential data.

    password is a one-way hash, never plaintext. It is None for accounts with
    no local credential. OAuth sign-ups get the hash of the default credential
    (see provision_oauth_user()).

    password and remember_token never leave the process: to_public_dict() and
    api.models.UserResponse both omit them.
    """

    name: str
    email: str
    password: str | None = None
    email_verified_at: datetime | None = None
    remember_token: str | None = None
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


def get_default_credential() -> str:
    return _DEFAULT_CREDENTIAL


def required_fields() -> frozenset[str]:
    """Fields that must never be empty on a valid record."""
    return _REQUIRED_FIELDS


def validate_required_fields(user: User) -> None:
    """Raise ValueError listing every required field that is missing or blank."""
    missing = sorted(f for f in _REQUIRED_FIELDS if not (getattr(user, f, None) or "").strip())
    if missing:
        raise ValueError(f"Missing required user field(s): {', '.join(missing)}")


def is_using_default_credential(user: User, verify: Verifier = verify_password) -> bool:
    """Return True if the stored hash verifies against the default credential.

    No stored password is a normal outcome and returns False. A verifier that
    raises (malformed hash, backend error) also yields False: this check only
    decides whether to nudge the user, so it must not break the page showing
    the account.
    """
    if not user.password:
        return False
    try:
        return bool(verify(_DEFAULT_CREDENTIAL, user.password))
    except Exception as exc:
        logger.debug("Default credential check failed for user id=%s: %s", user.id, exc)
        return False


def set_password(user: User, plain: str, hasher: Hasher = hash_password) -> None:
    """Hash the plaintext password and store the hash on the record."""
    user.password = hasher(plain)
    user.updated_at = datetime.now(timezone.utc)


def provision_oauth_user(name: str, email: str, hasher: Hasher = hash_password) -> User:
    """Build the record for a first-time sign-in through an identity provider.

    The provider has already confirmed the email address, so
    email_verified_at is stamped now. The password is the hashed default
    credential until the user picks their own.
    """
    now = datetime.now(timezone.utc)
    user = User(
        name=name,
        email=email,
        password=hasher(_DEFAULT_CREDENTIAL),
        email_verified_at=now,
        created_at=now,
        updated_at=now,
    )
    validate_required_fields(user)
    logger.info("Provisioned OAuth user record (email verified by provider)")
    return user


def to_public_dict(user: User) -> dict[str, Any]:
    """Serialize a user for external consumers.

    The key list is fixed here rather than derived from the dataclass, so a new
    sensitive field is hidden until someone adds it on purpose.
    """
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "email_verified_at": _iso(user.email_verified_at),
        "created_at": _iso(user.created_at),
        "updated_at": _iso(user.updated_at),
    }


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
