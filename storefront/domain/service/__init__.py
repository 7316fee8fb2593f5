"""Domain services."""

from .jwt_service import JWTService
from .password_service import PasswordService
from .product_service import ProductService
from .search_service import SearchService
from .user_service import UserService

__all__ = [
    "JWTService",
    "PasswordService",
    "ProductService",
    "SearchService",
    "UserService",
]
