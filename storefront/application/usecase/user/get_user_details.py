"""Get user details use case."""

from pydantic import BaseModel

from storefront.domain.service import UserService

from ..base import BaseUseCase
from .profile import UserProfile, caller_id


class GetUserDetailsRequest(BaseModel):
    """Get user details request."""

    user_id: str  # From authenticated user


class GetUserDetailsUseCase(BaseUseCase[GetUserDetailsRequest, UserProfile]):
    """Use case for reading the authenticated user's own details."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserDetailsRequest) -> UserProfile:
        """Fetch the user.

        Raises:
            NotFoundError: If the user no longer exists
            UnauthorizedError: If the caller id is not a UUID
        """
        user = await self.user_service.get_by_id(caller_id(request.user_id))
        return UserProfile.from_user(user)
