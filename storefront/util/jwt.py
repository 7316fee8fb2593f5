"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from storefront.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    id: str
    username: str
    email: str
    role: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    username: str,
    email: str,
    role: str,
    settings: AuthSettings,
    now: datetime | None = None,
) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        username: Username at the time of issuance
        email: User email
        role: User role ("user" or "admin")
        settings: Authentication settings
        now: Issuance time (defaults to the current UTC time)

    Returns:
        Encoded JWT token
    """
    issued_at = now or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "id": user_id,
        "username": username,
        "email": email,
        "role": role,
        "iat": issued_at,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "id", "role"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValueError:
        # Signature checked out but the claims don't have our shape
        raise JWTError("Invalid token")
