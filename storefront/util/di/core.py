"""Configuration provider (non-mockable)."""

from dishka import Scope, provide

from storefront.config import AuthSettings, CatalogSettings, Settings
from storefront.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Builds Settings once per container and exposes the sections services need.

    Tests override values through environment variables, not a mock provider.
    """

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def catalog(self, settings: Settings) -> CatalogSettings:
        return settings.catalog
