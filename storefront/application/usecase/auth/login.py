"""Password login use case."""

from datetime import datetime, timezone

import logfire
from pydantic import BaseModel

from storefront.domain.error import (
    FederatedAccountError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from storefront.domain.service import JWTService, PasswordService, UserService
from storefront.domain.value import Email

from ..base import BaseUseCase
from .common import AuthResponse, AuthUser


class LoginRequest(BaseModel):
    """Password login request."""

    email: str
    password: str


class LoginUseCase(BaseUseCase[LoginRequest, AuthResponse]):
    """Use case for logging in with email and password."""

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> None:
        self.user_service = user_service
        self.password_service = password_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute password login.

        Steps:
        1. Look up user by email
        2. Refuse federated-only accounts (no local hash)
        3. Compare password against stored hash
        4. Refresh last_login and issue JWT token

        Raises:
            ValidationError: If the email or password is malformed
            NotFoundError: If no user has this email
            FederatedAccountError: If the account has no local password
            UnauthorizedError: If the password does not match
        """
        try:
            email = Email(request.email)
        except ValueError:
            raise ValidationError("Please include a valid email", field="email")
        if not request.password:
            raise ValidationError("Password is required", field="password")

        with logfire.span("login", email=email.root):
            user = await self.user_service.get_user_by_email(email)
            if not user:
                raise NotFoundError("User", email.root)

            if not user.has_local_password:
                logfire.info("Password login on federated account", user_id=str(user.id))
                raise FederatedAccountError()

            if not await self.password_service.verify(
                request.password, user.password_hash
            ):
                logfire.info("Invalid password", user_id=str(user.id))
                raise UnauthorizedError("Invalid password")

            now = datetime.now(timezone.utc)
            user = await self.user_service.save(
                user.model_copy(update={"last_login": now, "updated_at": now})
            )

            token = self.jwt_service.create_token(user)
            logfire.info("User logged in", user_id=str(user.id))

            return AuthResponse(
                message="Login successful",
                token=token,
                user=AuthUser.from_user(user),
            )
