"""Shapes shared by the authentication use cases."""

from pydantic import BaseModel

from storefront.domain.model import User


class AuthUser(BaseModel):
    """Public view of a user returned with a token. Never includes the hash."""

    id: str
    username: str
    email: str
    role: str

    @classmethod
    def from_user(cls, user: User) -> "AuthUser":
        return cls(
            id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            role=user.role.value,
        )


class AuthResponse(BaseModel):
    """Token issuance response."""

    message: str
    token: str
    user: AuthUser
