"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, ConfigDict, Field

from storefront.application.usecase.auth import (
    FederatedLoginUseCase,
    LoginUseCase,
    SignupUseCase,
)
from storefront.application.usecase.auth.common import AuthResponse
from storefront.application.usecase.auth.federated_login import FederatedLoginRequest
from storefront.application.usecase.auth.login import LoginRequest
from storefront.application.usecase.auth.signup import SignupRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class SignupAPIRequest(BaseModel):
    """API request for local account registration."""

    username: str = ""
    email: str = ""
    password: str = ""


class LoginAPIRequest(BaseModel):
    """API request for email/password login."""

    email: str = ""
    password: str = ""


class GoogleLoginAPIRequest(BaseModel):
    """API request carrying an identity asserted by Google sign-in."""

    model_config = ConfigDict(populate_by_name=True)

    uid: str = ""
    display_name: str = Field("", alias="displayName")
    email: str = ""
    photo_url: str | None = Field(None, alias="photoURL")


@router.post(
    "/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: SignupAPIRequest,
    signup_use_case: FromDishka[SignupUseCase],
) -> AuthResponse:
    """Register a local account and return a bearer token.

    Example:
        POST /auth/signup
        {"username": "alice", "email": "alice@example.com", "password": "secret1"}

        Response (201):
        {
            "message": "User registered successfully",
            "token": "eyJ...",
            "user": {"id": "...", "username": "alice", "email": "alice@example.com", "role": "user"}
        }
    """
    return await signup_use_case.execute(
        SignupRequest(
            username=request.username,
            email=request.email,
            password=request.password,
        )
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Log in with email and password.

    Raises 404 for an unknown email, 400 for accounts that only sign in
    through Google and 401 for a wrong password.
    """
    return await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )


@router.post("/google-login", response_model=AuthResponse)
async def google_login(
    request: GoogleLoginAPIRequest,
    federated_login_use_case: FromDishka[FederatedLoginUseCase],
) -> AuthResponse:
    """Log in (registering on first use) with a Google identity.

    Example:
        POST /auth/google-login
        {
            "uid": "abc123",
            "displayName": "Alice",
            "email": "alice@gmail.com",
            "photoURL": "https://lh3.googleusercontent.com/..."
        }
    """
    logger.info(f"Google login for {request.email}")
    return await federated_login_use_case.execute(
        FederatedLoginRequest(
            uid=request.uid,
            display_name=request.display_name,
            email=request.email,
            photo_url=request.photo_url,
        )
    )
