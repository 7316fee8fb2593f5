"""Application layer DI providers."""

from dishka import Scope, provide

from storefront.application.usecase.auth import (
    FederatedLoginUseCase,
    LoginUseCase,
    SignupUseCase,
)
from storefront.application.usecase.product import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
)
from storefront.application.usecase.search import (
    DeleteSearchUseCase,
    ListSearchesUseCase,
    RecordSearchUseCase,
)
from storefront.application.usecase.user import (
    GetUserDetailsUseCase,
    UpdateUserDetailsUseCase,
)
from storefront.config import AuthSettings, CatalogSettings
from storefront.domain.service import (
    JWTService,
    PasswordService,
    ProductService,
    SearchService,
    UserService,
)
from storefront.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(
            user_service=user_service,
            password_service=password_service,
            jwt_service=jwt_service,
            auth_settings=auth_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> LoginUseCase:
        """Provide password login use case."""
        return LoginUseCase(
            user_service=user_service,
            password_service=password_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_federated_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> FederatedLoginUseCase:
        """Provide federated login use case."""
        return FederatedLoginUseCase(user_service=user_service, jwt_service=jwt_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_user_details_use_case(
        self, user_service: UserService
    ) -> GetUserDetailsUseCase:
        """Provide get user details use case."""
        return GetUserDetailsUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_details_use_case(
        self, user_service: UserService
    ) -> UpdateUserDetailsUseCase:
        """Provide update user details use case."""
        return UpdateUserDetailsUseCase(user_service=user_service)

    # Product use cases
    @provide(scope=Scope.REQUEST)
    def get_create_product_use_case(
        self, product_service: ProductService, catalog_settings: CatalogSettings
    ) -> CreateProductUseCase:
        """Provide create product use case."""
        return CreateProductUseCase(
            product_service=product_service, catalog_settings=catalog_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_list_products_use_case(
        self, product_service: ProductService
    ) -> ListProductsUseCase:
        """Provide list products use case."""
        return ListProductsUseCase(product_service=product_service)

    @provide(scope=Scope.REQUEST)
    def get_get_product_use_case(
        self, product_service: ProductService
    ) -> GetProductUseCase:
        """Provide get product use case."""
        return GetProductUseCase(product_service=product_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_product_use_case(
        self, product_service: ProductService
    ) -> DeleteProductUseCase:
        """Provide delete product use case."""
        return DeleteProductUseCase(product_service=product_service)

    # Search history use cases
    @provide(scope=Scope.REQUEST)
    def get_record_search_use_case(
        self, search_service: SearchService
    ) -> RecordSearchUseCase:
        """Provide record search use case."""
        return RecordSearchUseCase(search_service=search_service)

    @provide(scope=Scope.REQUEST)
    def get_list_searches_use_case(
        self, search_service: SearchService
    ) -> ListSearchesUseCase:
        """Provide list searches use case."""
        return ListSearchesUseCase(search_service=search_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_search_use_case(
        self, search_service: SearchService
    ) -> DeleteSearchUseCase:
        """Provide delete search use case."""
        return DeleteSearchUseCase(search_service=search_service)
