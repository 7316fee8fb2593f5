"""Dependency injection wiring.

``PROVIDERS`` lists the provider bases the container is assembled from.
Mock implementations live under ``tests/di`` and register themselves as
subclasses when imported.
"""

from storefront.util.di.application import ProdApplicationProvider
from storefront.util.di.base import Component, ProviderBase
from storefront.util.di.core import ProdConfigProvider
from storefront.util.di.domain import ProdDomainProvider
from storefront.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]

__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
]
