"""JWT token domain service."""

import logfire

from storefront.config import AuthSettings
from storefront.domain.model import User
from storefront.util.jwt import JWTError, TokenPayload, create_token, verify_token


class JWTService:
    """Issues and checks bearer tokens for users.

    Tokens carry ``{id, username, email, role}`` and expire after
    ``auth.jwt_expiry_days``. Signing is synchronous; HS256 is cheap enough
    not to need a worker thread.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        token = create_token(
            user_id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            role=user.role.value,
            settings=self.auth_settings,
        )
        logfire.info("JWT token issued", user_id=str(user.id), role=user.role.value)
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Decode a token issued by this service.

        Raises:
            JWTError: If the token is malformed, tampered with or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("JWT token rejected", reason=str(e))
            raise
