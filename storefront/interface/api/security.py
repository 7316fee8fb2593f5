"""Bearer token authentication helpers for routes."""

from fastapi import HTTPException, status

from storefront.domain.error import ForbiddenError
from storefront.domain.service import JWTService
from storefront.domain.value import Role
from storefront.util.jwt import JWTError, TokenPayload


def authenticate(jwt_service: JWTService, authorization: str | None) -> TokenPayload:
    """Verify the ``Authorization: Bearer <token>`` header.

    Args:
        jwt_service: JWT service from DI
        authorization: Raw Authorization header value

    Returns:
        Decoded token payload

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return jwt_service.verify_token(token.strip())
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


def require_admin(payload: TokenPayload) -> TokenPayload:
    """Reject non-admin callers with 403."""
    if payload.role != Role.ADMIN.value:
        raise ForbiddenError("Admin access required")
    return payload
