"""Engine, sessions and error classification for PostgreSQL."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from storefront.config import Settings

# SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine from ``settings.database``.

    SQL is echoed when ``debug`` is on.
    """
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Rows stay readable after commit; mappers copy them into domain models anyway
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


def is_unique_violation(error: IntegrityError) -> bool:
    """Whether an IntegrityError came from a unique constraint.

    asyncpg exposes ``sqlstate``; psycopg exposes ``pgcode``.
    """
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate:
        return sqlstate == UNIQUE_VIOLATION
    return "unique" in str(orig).lower()
