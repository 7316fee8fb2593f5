"""Profile view shared by the user use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from storefront.domain.error import UnauthorizedError
from storefront.domain.model import User
from storefront.domain.value import UserId


class UserProfile(BaseModel):
    """User details without the password hash."""

    id: str
    username: str
    email: str
    role: str
    profile_picture: str | None
    phone_number: str | None
    last_login: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            role=user.role.value,
            profile_picture=user.profile_picture,
            phone_number=user.phone_number,
            last_login=user.last_login,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


def caller_id(raw: str) -> UserId:
    """Parse the ``id`` claim of an authenticated caller.

    Raises:
        UnauthorizedError: If the claim is not a UUID
    """
    try:
        return UserId(UUID(raw))
    except ValueError:
        raise UnauthorizedError("Invalid token")
