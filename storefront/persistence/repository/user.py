"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.error import ConflictError, NotFoundError
from storefront.domain.model import User
from storefront.domain.repository import UserRepository
from storefront.domain.value import Email, UserId, Username
from storefront.persistence.database import is_unique_violation
from storefront.persistence.mappers import row_to_user, user_to_dict
from storefront.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def create(self, user: User) -> User:
        """Insert a new user.

        Raises:
            ConflictError: If the username or email is already taken
        """
        stmt = users_table.insert().values(**user_to_dict(user))
        await self._execute_write(stmt)
        return user

    async def save(self, user: User) -> User:
        """Update an existing user.

        Raises:
            ConflictError: If the new username or email is already taken
            NotFoundError: If the user does not exist
        """
        user_dict = user_to_dict(user)
        user_dict.pop("id")
        stmt = (
            users_table.update().where(users_table.c.id == user.id).values(**user_dict)
        )
        result = await self._execute_write(stmt)
        if result.rowcount == 0:
            raise NotFoundError("User", str(user.id))
        return user

    async def _execute_write(self, stmt):
        # Savepoint keeps the request transaction usable after a unique violation
        try:
            async with self.session.begin_nested():
                return await self.session.execute(stmt)
        except IntegrityError as e:
            if is_unique_violation(e):
                raise ConflictError("User already exists with this email or username")
            raise
