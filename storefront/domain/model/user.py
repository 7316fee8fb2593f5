"""User aggregate root.

Users sign up with a password or arrive through a federated provider.
Federated-only users carry the provider's opaque id in ``password_hash``,
which never passes a bcrypt comparison.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from storefront.domain.base import DomainModel
from storefront.domain.value import Email, Role, UserId, Username
from storefront.util.password import is_password_hash


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    email: Email
    password_hash: str = Field(repr=False)
    role: Role = Role.USER
    profile_picture: Optional[str] = None
    phone_number: Optional[str] = None
    last_login: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def has_local_password(self) -> bool:
        """Whether the account can log in with a password."""
        return is_password_hash(self.password_hash)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
