"""Domain layer DI providers."""

from dishka import Scope, provide

from storefront.config import AuthSettings
from storefront.domain.repository import (
    ProductRepository,
    SearchRepository,
    UserRepository,
)
from storefront.domain.service import (
    JWTService,
    PasswordService,
    ProductService,
    SearchService,
    UserService,
)
from storefront.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    Services are REQUEST-scoped to align with the repository/session lifecycle.
    The stateless token and password services live for the whole app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing service."""
        return PasswordService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_product_service(
        self, product_repository: ProductRepository
    ) -> ProductService:
        """Provide product domain service."""
        return ProductService(product_repository=product_repository)

    @provide
    def get_search_service(self, search_repository: SearchRepository) -> SearchService:
        """Provide search history domain service."""
        return SearchService(search_repository=search_repository)
