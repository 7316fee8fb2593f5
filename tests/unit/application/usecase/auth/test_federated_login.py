"""Unit tests for FederatedLoginUseCase."""

import asyncio

from dishka import AsyncContainer
import pytest

from storefront.application.usecase.auth import FederatedLoginUseCase, SignupUseCase
from storefront.application.usecase.auth.federated_login import FederatedLoginRequest
from storefront.application.usecase.auth.signup import SignupRequest
from storefront.domain.error import ConflictError, ValidationError
from storefront.domain.service import JWTService, UserService
from storefront.domain.value import Email
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def google(display_name: str = "Alice", photo_url: str | None = None):
    return FederatedLoginRequest(
        uid="uid-123",
        display_name=display_name,
        email="alice@gmail.com",
        photo_url=photo_url,
    )


class TestFederatedLoginUseCase:
    """Tests for FederatedLoginUseCase."""

    @pytest.mark.asyncio
    async def test_first_login_registers_user(self, unit_env: AsyncContainer):
        # Arrange
        use_case = await unit_env.get(FederatedLoginUseCase)
        user_service = await unit_env.get(UserService)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await use_case.execute(google(photo_url="https://img/a.png"))

        # Assert
        assert response.message == "User registered and logged in successfully"
        user = await user_service.get_user_by_email(Email("alice@gmail.com"))
        assert user is not None
        assert user.username.root == "Alice"
        assert user.profile_picture == "https://img/a.png"
        assert user.last_login is not None
        assert not user.has_local_password
        assert jwt_service.verify_token(response.token).id == str(user.id)

    @pytest.mark.asyncio
    async def test_changed_display_name_updates_username_only(
        self, unit_env: AsyncContainer
    ):
        # Arrange
        use_case = await unit_env.get(FederatedLoginUseCase)
        user_service = await unit_env.get(UserService)
        first = await use_case.execute(google("Alice"))

        # Act
        second = await use_case.execute(google("Alice Smith"))

        # Assert
        assert second.message == "Login successful"
        assert second.user.id == first.user.id
        user = await user_service.get_user_by_email(Email("alice@gmail.com"))
        assert user is not None
        assert user.username.root == "Alice Smith"
        assert user.email.root == "alice@gmail.com"

    @pytest.mark.asyncio
    async def test_unchanged_login_only_refreshes_last_login(
        self, unit_env: AsyncContainer
    ):
        # Arrange
        use_case = await unit_env.get(FederatedLoginUseCase)
        user_service = await unit_env.get(UserService)
        await use_case.execute(google(photo_url="https://img/a.png"))
        before = await user_service.get_user_by_email(Email("alice@gmail.com"))
        await asyncio.sleep(0.01)

        # Act
        await use_case.execute(google(photo_url="https://img/a.png"))

        # Assert
        after = await user_service.get_user_by_email(Email("alice@gmail.com"))
        assert before is not None and after is not None
        assert after.username == before.username
        assert after.profile_picture == before.profile_picture
        assert after.password_hash == before.password_hash
        assert after.last_login > before.last_login
        assert after.updated_at > before.updated_at

    @pytest.mark.asyncio
    async def test_display_name_clashing_with_other_username_conflicts(
        self, unit_env: AsyncContainer
    ):
        # Arrange
        signup = await unit_env.get(SignupUseCase)
        use_case = await unit_env.get(FederatedLoginUseCase)
        await signup.execute(
            SignupRequest(username="Alice", email="a@x.com", password="secret1")
        )

        # Act & Assert
        with pytest.raises(ConflictError):
            await use_case.execute(google("Alice"))

    @pytest.mark.asyncio
    async def test_missing_uid_is_rejected(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(FederatedLoginUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                FederatedLoginRequest(uid="", display_name="A", email="a@gmail.com")
            )
        assert exc_info.value.field == "uid"
