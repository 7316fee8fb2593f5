"""PostgreSQL repository implementations."""

from storefront.persistence.repository.product import PostgresProductRepository
from storefront.persistence.repository.search import PostgresSearchRepository
from storefront.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresProductRepository",
    "PostgresSearchRepository",
]
