"""Repository interfaces for the storefront domain.

Interfaces live in the domain layer; implementations live in persistence.
"""

from storefront.domain.repository.product import ProductRepository
from storefront.domain.repository.search import SearchRepository
from storefront.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ProductRepository",
    "SearchRepository",
]
