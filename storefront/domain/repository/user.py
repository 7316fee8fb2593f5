"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from storefront.domain.model.user import User
from storefront.domain.value import Email, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Implementations must enforce uniqueness of ``username`` and ``email`` and
    raise ``ConflictError`` when a write would break it. That check is the
    only guard against two concurrent signups for the same identity.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their (normalised) email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The inserted user

        Raises:
            ConflictError: If the username or email is already taken
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Update an existing user.

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            ConflictError: If the new username or email is already taken
            NotFoundError: If the user does not exist
        """
        pass
