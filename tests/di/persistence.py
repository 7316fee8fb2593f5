"""Mock persistence providers for testing."""

from dishka import Scope, provide

from storefront.domain.repository import (
    ProductRepository,
    SearchRepository,
    UserRepository,
)
from storefront.persistence.repository.inmemory import (
    InMemoryProductRepository,
    InMemorySearchRepository,
    InMemoryUserRepository,
)
from storefront.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope so state survives across HTTP requests against one app;
    every test builds its own container and therefore starts empty.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_product_repository(self) -> ProductRepository:
        """Provide in-memory product repository."""
        return InMemoryProductRepository()

    @provide(scope=Scope.APP)
    def get_search_repository(self) -> SearchRepository:
        """Provide in-memory search repository."""
        return InMemorySearchRepository()
