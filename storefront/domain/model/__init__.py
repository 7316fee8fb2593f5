"""Domain model entities for the storefront."""

from storefront.domain.model.product import Product
from storefront.domain.model.search import Search
from storefront.domain.model.user import User

__all__ = [
    "User",
    "Product",
    "Search",
]
