"""In-memory user repository for testing."""

from typing import Optional

from storefront.domain.error import ConflictError, NotFoundError
from storefront.domain.model import User
from storefront.domain.repository import UserRepository
from storefront.domain.value import Email, UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces the same username/email uniqueness as the database.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def create(self, user: User) -> User:
        """Insert a new user."""
        if user.id in self._users:
            raise ConflictError(f"User {user.id} already exists")
        self._check_unique(user)
        self._users[user.id] = user
        return user

    async def save(self, user: User) -> User:
        """Update an existing user."""
        if user.id not in self._users:
            raise NotFoundError("User", str(user.id))
        self._check_unique(user)
        self._users[user.id] = user
        return user

    def _check_unique(self, user: User) -> None:
        for other in self._users.values():
            if other.id == user.id:
                continue
            if other.username == user.username or other.email == user.email:
                raise ConflictError("User already exists with this email or username")
