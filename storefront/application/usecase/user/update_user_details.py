"""Update user details use case."""

from datetime import datetime, timezone

import logfire
from pydantic import BaseModel

from storefront.domain.error import ConflictError, ValidationError
from storefront.domain.service import UserService
from storefront.domain.value import PhoneNumber, Username

from ..base import BaseUseCase
from .profile import UserProfile, caller_id

USERNAME_TAKEN_MESSAGE = "Username is already taken"


class UpdateUserDetailsRequest(BaseModel):
    """Update user details request.

    Empty or missing fields are left unchanged.
    """

    user_id: str  # From authenticated user
    username: str | None = None
    profile_picture: str | None = None
    phone_number: str | None = None


class UpdateUserDetailsUseCase(BaseUseCase[UpdateUserDetailsRequest, UserProfile]):
    """Use case for updating a user's own profile.

    Username, profile picture and phone number can be changed.
    Email and role cannot be changed through this endpoint.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user details use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserDetailsRequest) -> UserProfile:
        """Execute update flow.

        Steps:
        1. Validate provided fields
        2. Get user by ID
        3. Reject a username held by another user
        4. Save with refreshed updated_at

        Raises:
            ValidationError: If a provided field is malformed
            UnauthorizedError: If the caller id is not a UUID
            NotFoundError: If user not found
            ConflictError: If the username is taken
        """
        updates = self._validated_updates(request)

        with logfire.span("update_user_details", user_id=request.user_id):
            user = await self.user_service.get_by_id(caller_id(request.user_id))

            new_username = updates.get("username")
            if new_username is not None and new_username != user.username:
                holder = await self.user_service.get_user_by_username(new_username)
                if holder and holder.id != user.id:
                    raise ConflictError(USERNAME_TAKEN_MESSAGE)

            updates["updated_at"] = datetime.now(timezone.utc)
            try:
                saved = await self.user_service.save(user.model_copy(update=updates))
            except ConflictError:
                raise ConflictError(USERNAME_TAKEN_MESSAGE)

            logfire.info(
                "User details updated",
                user_id=request.user_id,
                fields=sorted(k for k in updates if k != "updated_at"),
            )
            return UserProfile.from_user(saved)

    def _validated_updates(self, request: UpdateUserDetailsRequest) -> dict:
        updates: dict = {}

        if request.username:
            try:
                updates["username"] = Username(request.username)
            except ValueError:
                raise ValidationError(
                    "Username must be a non-empty string", field="username"
                )

        if request.profile_picture:
            if not request.profile_picture.startswith(("http://", "https://")):
                raise ValidationError(
                    "Profile picture must be a valid URL", field="profile_picture"
                )
            updates["profile_picture"] = request.profile_picture

        if request.phone_number:
            try:
                updates["phone_number"] = PhoneNumber(request.phone_number).root
            except ValueError:
                raise ValidationError(
                    "Please enter a valid phone number", field="phone_number"
                )

        return updates
