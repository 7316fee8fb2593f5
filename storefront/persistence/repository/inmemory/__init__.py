"""In-memory repository implementations for testing."""

from .product import InMemoryProductRepository
from .search import InMemorySearchRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryProductRepository",
    "InMemorySearchRepository",
    "InMemoryUserRepository",
]
