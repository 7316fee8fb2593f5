"""Unit tests for user details use cases."""

from dishka import AsyncContainer
import pytest

from storefront.application.usecase.auth import SignupUseCase
from storefront.application.usecase.auth.signup import SignupRequest
from storefront.application.usecase.user import (
    GetUserDetailsUseCase,
    UpdateUserDetailsUseCase,
)
from storefront.application.usecase.user.get_user_details import (
    GetUserDetailsRequest,
)
from storefront.application.usecase.user.update_user_details import (
    UpdateUserDetailsRequest,
)
from storefront.domain.error import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def register(container: AsyncContainer, username: str, email: str) -> str:
    signup = await container.get(SignupUseCase)
    response = await signup.execute(
        SignupRequest(username=username, email=email, password="secret1")
    )
    return response.user.id


class TestUpdateUserDetailsUseCase:
    """Tests for UpdateUserDetailsUseCase."""

    @pytest.mark.asyncio
    async def test_updates_only_provided_fields(self, unit_env: AsyncContainer):
        # Arrange
        user_id = await register(unit_env, "alice", "a@x.com")
        use_case = await unit_env.get(UpdateUserDetailsUseCase)

        # Act
        profile = await use_case.execute(
            UpdateUserDetailsRequest(
                user_id=user_id, phone_number="+1 555-123-4567", username=""
            )
        )

        # Assert
        assert profile.username == "alice"
        assert profile.phone_number == "+1 555-123-4567"
        assert profile.profile_picture is None
        assert profile.updated_at >= profile.created_at

    @pytest.mark.asyncio
    async def test_rename_to_taken_username_conflicts(self, unit_env: AsyncContainer):
        # Arrange
        await register(unit_env, "alice", "a@x.com")
        bob_id = await register(unit_env, "bob", "b@x.com")
        use_case = await unit_env.get(UpdateUserDetailsUseCase)

        # Act & Assert
        with pytest.raises(ConflictError, match="Username is already taken"):
            await use_case.execute(
                UpdateUserDetailsRequest(user_id=bob_id, username="alice")
            )

    @pytest.mark.asyncio
    async def test_keeping_own_username_is_allowed(self, unit_env: AsyncContainer):
        user_id = await register(unit_env, "alice", "a@x.com")
        use_case = await unit_env.get(UpdateUserDetailsUseCase)

        profile = await use_case.execute(
            UpdateUserDetailsRequest(user_id=user_id, username="alice")
        )

        assert profile.username == "alice"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "fields,field",
        [
            ({"profile_picture": "ftp://x/y.png"}, "profile_picture"),
            ({"phone_number": "call me"}, "phone_number"),
        ],
    )
    async def test_rejects_malformed_fields(
        self, unit_env: AsyncContainer, fields, field
    ):
        user_id = await register(unit_env, "alice", "a@x.com")
        use_case = await unit_env.get(UpdateUserDetailsUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(UpdateUserDetailsRequest(user_id=user_id, **fields))
        assert exc_info.value.field == field


class TestGetUserDetailsUseCase:
    @pytest.mark.asyncio
    async def test_returns_profile(self, unit_env: AsyncContainer):
        user_id = await register(unit_env, "alice", "a@x.com")
        use_case = await unit_env.get(GetUserDetailsUseCase)

        profile = await use_case.execute(GetUserDetailsRequest(user_id=user_id))

        assert profile.email == "a@x.com"
        assert "password_hash" not in profile.model_dump()

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetUserDetailsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetUserDetailsRequest(user_id="00000000-0000-0000-0000-000000000000")
            )

    @pytest.mark.asyncio
    async def test_non_uuid_caller_id_is_unauthorized(self, unit_env: AsyncContainer):
        get_details = await unit_env.get(GetUserDetailsUseCase)
        update_details = await unit_env.get(UpdateUserDetailsUseCase)

        with pytest.raises(UnauthorizedError):
            await get_details.execute(GetUserDetailsRequest(user_id="user-1"))
        with pytest.raises(UnauthorizedError):
            await update_details.execute(
                UpdateUserDetailsRequest(user_id="user-1", phone_number="+15551234567")
            )
