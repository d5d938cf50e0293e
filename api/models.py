"""
API response models for AccountDesk users.

These Pydantic v2 models define the HTTP transport contract. They are
intentionally separate from the dataclass in auth/models.py, which owns the
internal representation. Any JSON layer serializing a user goes through
UserResponse.

UserResponse has no password or remember_token field at all, so neither can
leak through model_dump() or a FastAPI response_model.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from auth.models import User, Verifier, is_using_default_credential
from auth.passwords import verify_password


class UserResponse(BaseModel):
    """Public view of a user account."""

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    name: str
    email: str
    email_verified_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    # Lets the UI prompt OAuth-provisioned users to choose a real password.
    using_default_password: bool = False

    @classmethod
    def from_user(cls, user: User, verify: Verifier = verify_password) -> "UserResponse":
        """Build a UserResponse from an auth.models.User instance."""
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            email_verified_at=user.email_verified_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
            using_default_password=is_using_default_credential(user, verify=verify),
        )


class OAuthProviderInfo(BaseModel):
    """One configured OAuth provider, as shown on a login page."""

    model_config = ConfigDict(frozen=True)

    name: str
    label: str
