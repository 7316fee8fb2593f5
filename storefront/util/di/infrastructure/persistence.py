"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from storefront.config import Settings
from storefront.domain.repository import (
    ProductRepository,
    SearchRepository,
    UserRepository,
)
from storefront.persistence.database import create_engine, create_session_factory
from storefront.persistence.repository import (
    PostgresProductRepository,
    PostgresSearchRepository,
    PostgresUserRepository,
)
from storefront.util.di.base import ProviderBase
from storefront.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories component. Mocked with in-memory repositories in tests."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories sharing one session per request."""

    __is_mock__ = False

    # Repositories are built from the request's AsyncSession
    users = provide(
        PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST
    )
    products = provide(
        PostgresProductRepository, provides=ProductRepository, scope=Scope.REQUEST
    )
    searches = provide(
        PostgresSearchRepository, provides=SearchRepository, scope=Scope.REQUEST
    )

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Engine for the container's lifetime, disposed on close."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request: commit on success, roll back on error."""
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise
            await session.commit()
