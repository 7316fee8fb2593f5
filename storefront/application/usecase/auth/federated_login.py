"""Federated (Google) login use case."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
from pydantic import BaseModel

from storefront.domain.error import ConflictError, ValidationError
from storefront.domain.model import User
from storefront.domain.service import JWTService, UserService
from storefront.domain.value import (
    AuthProvider,
    Email,
    FederatedIdentity,
    Role,
    UserId,
    Username,
)

from ..base import BaseUseCase
from .common import AuthResponse, AuthUser

LOGIN_MESSAGE = "Login successful"
REGISTERED_MESSAGE = "User registered and logged in successfully"
CONFLICT_MESSAGE = "A user with this email or username already exists."


class FederatedLoginRequest(BaseModel):
    """Identity assertion forwarded by the client after provider sign-in."""

    provider: AuthProvider = AuthProvider.GOOGLE
    uid: str
    display_name: str
    email: str
    photo_url: str | None = None


class FederatedLoginUseCase(BaseUseCase[FederatedLoginRequest, AuthResponse]):
    """Upsert a user from a federated identity and issue a token.

    Keyed on email: an existing user gets username/photo synced from the
    provider and last_login refreshed; a new user is created with the
    provider uid as a sentinel password hash.
    """

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: FederatedLoginRequest) -> AuthResponse:
        """Execute federated login.

        Raises:
            ValidationError: If the assertion is malformed
            ConflictError: If the store reports a duplicate key
        """
        identity = self._to_identity(request)

        with logfire.span(
            "federated_login",
            provider=identity.provider.value,
            email=identity.email.root,
        ):
            now = datetime.now(timezone.utc)
            user = await self.user_service.get_user_by_email(identity.email)

            try:
                if user:
                    updates: dict = {"last_login": now, "updated_at": now}
                    if user.username != identity.display_name:
                        updates["username"] = identity.display_name
                    if user.profile_picture != identity.photo_url:
                        updates["profile_picture"] = identity.photo_url
                    user = await self.user_service.save(user.model_copy(update=updates))
                    message = LOGIN_MESSAGE
                else:
                    user = await self.user_service.create(
                        User(
                            id=UserId(uuid4()),
                            username=identity.display_name,
                            email=identity.email,
                            password_hash=identity.sentinel_hash,
                            role=Role.USER,
                            profile_picture=identity.photo_url,
                            last_login=now,
                            created_at=now,
                            updated_at=now,
                        )
                    )
                    message = REGISTERED_MESSAGE
                    logfire.info("Federated user registered", user_id=str(user.id))
            except ConflictError:
                logfire.warn(
                    "Federated login hit a duplicate key", email=identity.email.root
                )
                raise ConflictError(CONFLICT_MESSAGE)

            token = self.jwt_service.create_token(user)

            return AuthResponse(message=message, token=token, user=AuthUser.from_user(user))

    def _to_identity(self, request: FederatedLoginRequest) -> FederatedIdentity:
        if not request.uid.strip():
            raise ValidationError("Provider uid is required", field="uid")
        try:
            display_name = Username(request.display_name)
        except ValueError:
            raise ValidationError("Display name is required", field="displayName")
        try:
            email = Email(request.email)
        except ValueError:
            raise ValidationError(
                "A valid email is required for Google login", field="email"
            )
        return FederatedIdentity(
            provider=request.provider,
            provider_user_id=request.uid,
            display_name=display_name,
            email=email,
            photo_url=request.photo_url or None,
        )
