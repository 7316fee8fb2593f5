"""User details routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from storefront.application.usecase.user import (
    GetUserDetailsUseCase,
    UpdateUserDetailsUseCase,
)
from storefront.application.usecase.user.get_user_details import (
    GetUserDetailsRequest,
)
from storefront.application.usecase.user.profile import UserProfile
from storefront.application.usecase.user.update_user_details import (
    UpdateUserDetailsRequest,
)
from storefront.domain.service import JWTService
from storefront.interface.api.security import authenticate

router = APIRouter(prefix="/api", tags=["users"], route_class=DishkaRoute)


class UpdateUserDetailsAPIRequest(BaseModel):
    """API request for updating the caller's details."""

    username: str | None = None
    profile_picture: str | None = None
    phone_number: str | None = None


class UserDetailsResponse(BaseModel):
    message: str
    result: UserProfile


class UpdateUserDetailsResponse(BaseModel):
    message: str
    user: UserProfile


@router.get("/details", response_model=UserDetailsResponse)
async def get_user_details(
    jwt_service: FromDishka[JWTService],
    get_user_details_use_case: FromDishka[GetUserDetailsUseCase],
    authorization: str | None = Header(None),
) -> UserDetailsResponse:
    """Get the authenticated user's details.

    Raises:
        HTTPException: 401 if not authenticated
    """
    payload = authenticate(jwt_service, authorization)
    profile = await get_user_details_use_case.execute(
        GetUserDetailsRequest(user_id=payload.id)
    )
    return UserDetailsResponse(message="User details fetched", result=profile)


@router.post("/updateDetails", response_model=UpdateUserDetailsResponse)
async def update_user_details(
    request: UpdateUserDetailsAPIRequest,
    jwt_service: FromDishka[JWTService],
    update_user_details_use_case: FromDishka[UpdateUserDetailsUseCase],
    authorization: str | None = Header(None),
) -> UpdateUserDetailsResponse:
    """Update the authenticated user's username, picture or phone number.

    Only fields present and non-empty in the body are applied.

    Example:
        POST /api/updateDetails
        Authorization: Bearer eyJ...
        {"phone_number": "+1 555-123-4567"}
    """
    payload = authenticate(jwt_service, authorization)
    profile = await update_user_details_use_case.execute(
        UpdateUserDetailsRequest(
            user_id=payload.id,
            username=request.username,
            profile_picture=request.profile_picture,
            phone_number=request.phone_number,
        )
    )
    return UpdateUserDetailsResponse(
        message="User details updated successfully", user=profile
    )
