"""Signup use case."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
from pydantic import BaseModel

from storefront.config import AuthSettings
from storefront.domain.error import ConflictError, ValidationError
from storefront.domain.model import User
from storefront.domain.service import JWTService, PasswordService, UserService
from storefront.domain.value import Email, Role, UserId, Username

from ..base import BaseUseCase
from .common import AuthResponse, AuthUser

DUPLICATE_USER_MESSAGE = "User already exists with this email or username"


class SignupRequest(BaseModel):
    """Signup request."""

    username: str
    email: str
    password: str


class SignupUseCase(BaseUseCase[SignupRequest, AuthResponse]):
    """Use case for registering a local (password) account."""

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize signup use case.

        Args:
            user_service: User domain service
            password_service: Password hashing service
            jwt_service: JWT token domain service
            auth_settings: Authentication settings
        """
        self.user_service = user_service
        self.password_service = password_service
        self.jwt_service = jwt_service
        self.auth_settings = auth_settings

    async def execute(self, request: SignupRequest) -> AuthResponse:
        """Execute signup flow.

        Steps:
        1. Validate input shape (before touching the store)
        2. Reject if username or email is already taken
        3. Hash password and create the user with role "user"
        4. Issue JWT token

        Raises:
            ValidationError: If the input is malformed
            ConflictError: If username or email already exists
        """
        username, email = self._validate(request)

        with logfire.span("signup", username=username.root, email=email.root):
            if await self.user_service.get_user_by_email(
                email
            ) or await self.user_service.get_user_by_username(username):
                logfire.info("Signup rejected - duplicate", email=email.root)
                raise ConflictError(DUPLICATE_USER_MESSAGE)

            now = datetime.now(timezone.utc)
            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=await self.password_service.hash(request.password),
                role=Role.USER,
                created_at=now,
                updated_at=now,
            )
            # The store's unique constraints catch a concurrent signup that
            # slipped past the check above.
            try:
                user = await self.user_service.create(user)
            except ConflictError:
                raise ConflictError(DUPLICATE_USER_MESSAGE)

            token = self.jwt_service.create_token(user)

            return AuthResponse(
                message="User registered successfully",
                token=token,
                user=AuthUser.from_user(user),
            )

    def _validate(self, request: SignupRequest) -> tuple[Username, Email]:
        try:
            username = Username(request.username)
        except ValueError:
            raise ValidationError("Username is required", field="username")

        try:
            email = Email(request.email)
        except ValueError:
            raise ValidationError("Please include a valid email", field="email")

        min_length = self.auth_settings.min_password_length
        if len(request.password) < min_length:
            raise ValidationError(
                f"Please enter a password with {min_length} or more characters",
                field="password",
            )

        max_bytes = self.auth_settings.max_password_bytes
        if len(request.password.encode("utf-8")) > max_bytes:
            raise ValidationError(
                f"Password must be at most {max_bytes} bytes long",
                field="password",
            )

        return username, email
