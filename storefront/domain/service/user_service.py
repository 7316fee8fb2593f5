"""User domain service."""

import logfire

from storefront.domain.error import NotFoundError
from storefront.domain.model import User
from storefront.domain.repository import UserRepository
from storefront.domain.value import Email, UserId, Username


class UserService:
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_email(self, email: Email) -> User | None:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if user:
                logfire.info("User found", email=email.root, user_id=str(user.id))
            else:
                logfire.info("User not found", email=email.root)
            return user

    async def get_user_by_username(self, username: Username) -> User | None:
        """Get user by username.

        Args:
            username: Username

        Returns:
            User if found, None otherwise
        """
        with logfire.span(
            "user_service.get_user_by_username", username=username.root
        ):
            return await self.user_repository.find_by_username(username)

    async def create(self, user: User) -> User:
        """Insert a new user.

        Raises:
            ConflictError: If username or email is taken
        """
        with logfire.span(
            "user_service.create", user_id=str(user.id), username=user.username.root
        ):
            created = await self.user_repository.create(user)
            logfire.info("User created", user_id=str(created.id))
            return created

    async def save(self, user: User) -> User:
        """Update an existing user.

        Raises:
            ConflictError: If the new username or email is taken
        """
        with logfire.span(
            "user_service.save", user_id=str(user.id), username=user.username.root
        ):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=str(saved.id))
            return saved
