"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from storefront.domain.error import ConflictError, NotFoundError
from storefront.domain.model import User
from storefront.domain.service import UserService
from storefront.domain.value import Email, UserId, Username
from storefront.persistence.repository.inmemory import InMemoryUserRepository


def make_user(username: str = "alice", email: str = "a@x.com") -> User:
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=Email(email),
        password_hash="google:uid-1",
    )


class TestUserService:
    """Tests for UserService lookups and uniqueness."""

    @pytest.mark.asyncio
    async def test_get_by_id_raises_when_missing(self):
        # Arrange
        service = UserService(InMemoryUserRepository())

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_lookup_by_email_is_case_insensitive(self):
        # Arrange
        service = UserService(InMemoryUserRepository())
        user = await service.create(make_user())

        # Act
        found = await service.get_user_by_email(Email("A@X.COM"))

        # Assert
        assert found is not None
        assert found.id == user.id

    @pytest.mark.asyncio
    async def test_create_rejects_duplicate_username(self):
        # Arrange
        service = UserService(InMemoryUserRepository())
        await service.create(make_user("alice", "a@x.com"))

        # Act & Assert
        with pytest.raises(ConflictError):
            await service.create(make_user("alice", "b@x.com"))

    @pytest.mark.asyncio
    async def test_save_rejects_email_of_another_user(self):
        # Arrange
        service = UserService(InMemoryUserRepository())
        await service.create(make_user("alice", "a@x.com"))
        bob = await service.create(make_user("bob", "b@x.com"))

        # Act & Assert
        with pytest.raises(ConflictError):
            await service.save(bob.model_copy(update={"email": Email("a@x.com")}))

    @pytest.mark.asyncio
    async def test_save_unknown_user_raises_not_found(self):
        service = UserService(InMemoryUserRepository())

        with pytest.raises(NotFoundError):
            await service.save(make_user())
